"""Admin backend for the local guide platform."""

__version__ = "0.1.0"
