"""Select, parse and index the contents of zip archives of collected logs."""

__version__ = "0.1.0"