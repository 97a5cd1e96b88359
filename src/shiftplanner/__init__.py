"""Weekly shift scheduling from ranked employee preferences."""

__version__ = "0.1.0"
