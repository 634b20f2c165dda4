"""awesome - a bundle of small developer command-line utilities."""

__version__ = "1.0.0"
