"""clipdeps: copy a source file and its local imports to the clipboard."""

__version__ = "0.1.0"
