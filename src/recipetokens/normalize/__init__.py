"""Normalize raw ingredient text and describe the known units."""

from recipetokens.normalize.substitutions import (
    SUBSTITUTION_RULES,
    SubstitutionRule,
    format_number,
    normalize,
)
from recipetokens.normalize.units import (
    UNIT_ALIAS_GROUPS,
    UnitAliasGroup,
    canonical_unit,
    iter_aliases,
)

__all__ = [
    "SUBSTITUTION_RULES",
    "UNIT_ALIAS_GROUPS",
    "SubstitutionRule",
    "UnitAliasGroup",
    "canonical_unit",
    "format_number",
    "iter_aliases",
    "normalize",
]
