# Library CLI Package
# ===================
# Session (application context), Renderer and the numbered menu REPL.
