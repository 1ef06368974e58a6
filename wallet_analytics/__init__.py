"""Wallet activity analytics: performance, risk, strategy and clustering."""

__version__ = "0.1.0"
