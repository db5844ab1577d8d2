"""plasmadeps - query dependencies of platform resources."""

__version__ = "0.1.0"
