"""
Library Catalog — Book Catalog Manager
======================================
Entry point for the interactive catalog menu.

Usage:
    python main.py [options] [library_path]

Options:
    --help              Show help
    --verbose, -v       Log debug details to stderr

Default:
    Interactive menu over ./library.txt
"""

import sys

from loguru import logger


def print_help(file=None):
    print("""
Library Catalog — Book Catalog Manager

Usage:
    python main.py [library_path]             Interactive menu
    python main.py --verbose [library_path]   Interactive menu with debug logging

Options:
    --help, -h      Show this help
    --verbose, -v   Log debug details to stderr
    library_path    Path to the library file (default: ./library.txt)

Menu:
    1. Add a book
    2. Update a book
    3. Delete a book
    4. Get details of a book
    5. List all books
    6. Save to file and exit
""", file=file or sys.stdout)


def configure_logging(verbose: bool = False) -> None:
    """Route loguru to stderr; warnings only unless verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main() -> None:
    """Parse CLI arguments and run the menu."""
    from storage.library_file import DEFAULT_LIBRARY_FILE

    args = sys.argv[1:]

    if "--help" in args or "-h" in args:
        print_help()
        return

    library_path = None
    verbose = False

    for arg in args:
        if arg in ("--verbose", "-v"):
            verbose = True
        elif arg.startswith("-"):
            print(f"Unknown option: {arg}", file=sys.stderr)
            print_help(sys.stderr)
            sys.exit(1)
        else:
            library_path = arg

    if library_path is None:
        library_path = DEFAULT_LIBRARY_FILE

    configure_logging(verbose)

    from cli.session import Session
    from cli.repl import REPL
    repl = REPL(Session(library_path))
    repl.run()


if __name__ == "__main__":
    main()
