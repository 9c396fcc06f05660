"""exportree - directory trees annotated with each source file's exports."""

__version__ = "0.1.0"
