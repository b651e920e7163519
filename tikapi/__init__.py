"""RouterOS API connection handling, login hashing, error codes and data models."""

__version__ = "0.1.0"