"""Exclusion rules for filtering directory entries."""

from .base_rules import BaseExclusionRules
from .name_rules import DEFAULT_EXCLUDED_PATTERNS, NameExclusionRules

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_EXCLUDED_PATTERNS",
    "NameExclusionRules",
]
