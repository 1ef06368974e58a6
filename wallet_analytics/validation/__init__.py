"""
Validation Layer
================
Data quality checks for the wallet analytics tables.
"""

from wallet_analytics.validation.core import DQReport, add_check, add_stat
from wallet_analytics.validation.data_quality import validate_data_quality

__all__ = [
    "DQReport",
    "add_check",
    "add_stat",
    "validate_data_quality",
]
