"""
Library Storage Tests
=====================
Tests for the JSON serializer and whole-file save/load.
"""

import json
import os
import shutil
import tempfile
import unittest

from catalog.book import Book
from storage.serializer import DecodeError, decode_catalog, encode_catalog
from storage.library_file import LibraryFile, StorageError


DUNE = Book("Dune", "Herbert", 1965, "SciFi")
EMMA = Book("Emma", "Austen", 1815, "Romance")


class StorageTestBase(unittest.TestCase):
    """Base with temp directory for library files."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp(prefix="library_storage_test_")
        self.path = os.path.join(self.test_dir, "library.txt")

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def write_raw(self, text: str):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)


# ═══════════════════════════════════════════════════════════════════════════
# Serializer
# ═══════════════════════════════════════════════════════════════════════════

class TestEncode(unittest.TestCase):

    def test_compact_title_keyed_object(self):
        text = encode_catalog([DUNE])
        self.assertEqual(
            text,
            '{"Dune":{"Title":"Dune","Author":"Herbert",'
            '"PublicationYear":1965,"Genre":"SciFi"}}')

    def test_empty_catalog(self):
        self.assertEqual(encode_catalog([]), "{}")

    def test_non_ascii_kept_verbatim(self):
        text = encode_catalog([Book("Les Misérables", "Hugo", 1862, "Roman")])
        self.assertIn("Misérables", text)


class TestDecode(unittest.TestCase):

    def test_decode(self):
        books = decode_catalog(encode_catalog([DUNE, EMMA]))
        self.assertEqual(books, {"Dune": DUNE, "Emma": EMMA})

    def test_decode_empty_object(self):
        self.assertEqual(decode_catalog("{}"), {})

    def test_invalid_json(self):
        with self.assertRaises(DecodeError):
            decode_catalog("{not json")

    def test_top_level_must_be_object(self):
        for text in ("[]", "null", '"Dune"', "42"):
            with self.subTest(text=text):
                with self.assertRaises(DecodeError):
                    decode_catalog(text)

    def test_record_must_be_object(self):
        with self.assertRaises(DecodeError):
            decode_catalog('{"Dune": "Herbert"}')

    def test_missing_field(self):
        record = DUNE.to_dict()
        del record["Genre"]
        with self.assertRaisesRegex(DecodeError, "missing"):
            decode_catalog(json.dumps({"Dune": record}))

    def test_unknown_field(self):
        record = dict(DUNE.to_dict(), Pages=412)
        with self.assertRaisesRegex(DecodeError, "unknown"):
            decode_catalog(json.dumps({"Dune": record}))

    def test_wrong_field_types(self):
        bad_values = [
            ("PublicationYear", "1965"),
            ("PublicationYear", 1965.0),
            ("PublicationYear", True),
            ("Author", None),
            ("Title", 7),
        ]
        for field, value in bad_values:
            with self.subTest(field=field, value=value):
                record = dict(DUNE.to_dict(), **{field: value})
                with self.assertRaises(DecodeError):
                    decode_catalog(json.dumps({"Dune": record}))

    def test_mismatched_key_uses_record_title(self):
        text = json.dumps({"Dune": dict(DUNE.to_dict(), Title="Dune Messiah")})
        books = decode_catalog(text)
        self.assertEqual(list(books), ["Dune Messiah"])
        self.assertEqual(books["Dune Messiah"].author, "Herbert")

    def test_integer_literal_past_conversion_limit(self):
        text = ('{"Dune":{"Title":"Dune","Author":"Herbert",'
                '"PublicationYear":' + "9" * 5000 + ',"Genre":"SciFi"}}')
        with self.assertRaisesRegex(DecodeError, "invalid JSON"):
            decode_catalog(text)

    def test_deeply_nested_json(self):
        with self.assertRaises(DecodeError):
            decode_catalog("[" * 100000 + "]" * 100000)

    def test_rekeyed_title_collision_rejected(self):
        text = json.dumps({
            "Dune": dict(EMMA.to_dict()),
            "Emma": dict(EMMA.to_dict(), Author="Someone Else"),
        })
        with self.assertRaisesRegex(DecodeError, "already used"):
            decode_catalog(text)

    def test_decode_error_is_value_error(self):
        self.assertTrue(issubclass(DecodeError, ValueError))


# ═══════════════════════════════════════════════════════════════════════════
# Library File
# ═══════════════════════════════════════════════════════════════════════════

class TestLibraryFile(StorageTestBase):

    def test_path_is_absolute(self):
        self.assertTrue(os.path.isabs(LibraryFile("library.txt").path))

    def test_save_then_load(self):
        lib = LibraryFile(self.path)
        lib.save([DUNE, EMMA])
        self.assertEqual(lib.load(), {"Dune": DUNE, "Emma": EMMA})

    def test_save_overwrites_wholesale(self):
        lib = LibraryFile(self.path)
        lib.save([DUNE, EMMA])
        lib.save([EMMA])
        self.assertEqual(list(lib.load()), ["Emma"])

    def test_saved_file_is_single_line(self):
        LibraryFile(self.path).save([DUNE, EMMA])
        with open(self.path, encoding="utf-8") as f:
            content = f.read()
        self.assertNotIn("\n", content)
        self.assertEqual(set(json.loads(content)), {"Dune", "Emma"})

    def test_load_missing_file(self):
        with self.assertRaises(StorageError) as ctx:
            LibraryFile(self.path).load()
        self.assertIn("cannot read", str(ctx.exception))

    def test_load_malformed_file(self):
        self.write_raw("Dune,Herbert,1965,SciFi\n")
        with self.assertRaises(StorageError) as ctx:
            LibraryFile(self.path).load()
        self.assertIsInstance(ctx.exception.__cause__, DecodeError)

    def test_load_empty_file(self):
        self.write_raw("")
        with self.assertRaises(StorageError):
            LibraryFile(self.path).load()

    def test_load_non_utf8_file(self):
        with open(self.path, "wb") as f:
            f.write(b'{"\xff\xfe": 1}')
        with self.assertRaises(StorageError):
            LibraryFile(self.path).load()

    def test_save_into_missing_directory(self):
        lib = LibraryFile(os.path.join(self.test_dir, "no_such_dir", "library.txt"))
        with self.assertRaises(StorageError) as ctx:
            lib.save([DUNE])
        self.assertIn("cannot write", str(ctx.exception))

    def test_load_oversized_year_is_storage_error(self):
        self.write_raw('{"Dune":{"Title":"Dune","Author":"Herbert",'
                       '"PublicationYear":' + "9" * 5000 + ',"Genre":"SciFi"}}')
        with self.assertRaises(StorageError) as ctx:
            LibraryFile(self.path).load()
        self.assertIsInstance(ctx.exception.__cause__, DecodeError)

    def test_load_hand_written_file(self):
        self.write_raw('{"Emma":{"Title":"Emma","Author":"Austen",'
                       '"PublicationYear":1815,"Genre":"Romance"}}')
        self.assertEqual(LibraryFile(self.path).load(), {"Emma": EMMA})


if __name__ == "__main__":
    unittest.main()
