"""Load Maven build artifacts into PL/Java enabled PostgreSQL databases."""

__version__ = "1.0.0"
