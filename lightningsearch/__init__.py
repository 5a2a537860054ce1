"""Multi-threaded search of directory trees for files by name and contents."""

__version__ = "0.1.0"