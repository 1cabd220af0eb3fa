"""
Field contracts for the CPA-005 record layout.
"""

from .field_rules import FIELD_CONTRACTS, FieldRules

__all__ = ["FIELD_CONTRACTS", "FieldRules"]
