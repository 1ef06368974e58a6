"""
Raw Layer
=========
Extract modules: wallet activity API → raw schema (append-only).
"""

from wallet_analytics.raw import wallet_activity

__all__ = [
    "wallet_activity",
]
