"""kata: small utility functions for practising unit testing."""

__version__ = "0.1.0"
