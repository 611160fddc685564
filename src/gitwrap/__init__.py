"""gitwrap — typed responses parsed from git command-line output."""

__version__ = "0.1.0"
