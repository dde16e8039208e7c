"""Configuration, logging helpers and storage for wallet and payment records."""

__version__ = "0.1.0"