"""Build an original Xbox soundtrack database (ST.DB) and WMA files from a music folder."""

__version__ = "0.1.2"