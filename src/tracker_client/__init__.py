"""Terminal client for the project/task tracker REST API."""

__version__ = "0.1.0"
