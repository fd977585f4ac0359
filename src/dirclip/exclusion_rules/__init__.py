"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .name_rules import DEFAULT_EXCLUDE, NameExclusionRules, is_excluded, parse_exclusion_list

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_EXCLUDE",
    "NameExclusionRules",
    "is_excluded",
    "parse_exclusion_list",
]
