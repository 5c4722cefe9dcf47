"""Unit alias table used when matching amounts in ingredient lines."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UnitAliasGroup:
    """Interchangeable spellings of one unit, tried in declared order."""

    name: str
    aliases: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.aliases:
            raise ValueError(f"Unit group {self.name!r} needs at least one alias")


# =============================================================================
# Unit Alias Table
# =============================================================================

# Order matters: groups (and aliases within a group) are tried first to last
# and the first spelling that fits wins. Matching is case-sensitive.
UNIT_ALIAS_GROUPS: tuple[UnitAliasGroup, ...] = (
    UnitAliasGroup("dl", ("dl",)),
    UnitAliasGroup("tsp", ("tsp", "tl", "teaspoon", "teaspoons")),
    UnitAliasGroup("tbsp", ("tbsp", "Tbsp", "tablespoon", "rkl")),
    UnitAliasGroup("g", ("g",)),
    UnitAliasGroup("prk", ("prk",)),
    UnitAliasGroup("cup", ("cup", "cups")),
    UnitAliasGroup("ml", ("ml",)),
    # TODO: accept "lb" and "in" without the trailing dot
    UnitAliasGroup("lb", ("lb.",)),
    UnitAliasGroup("oz", ("oz",)),
    UnitAliasGroup("pound", ("pound",)),
    UnitAliasGroup("in", ("in.",)),
)


def iter_aliases(groups: tuple[UnitAliasGroup, ...] = UNIT_ALIAS_GROUPS):
    """Yield every alias spelling in matching priority order."""
    for group in groups:
        yield from group.aliases


def canonical_unit(
    alias: str, groups: tuple[UnitAliasGroup, ...] = UNIT_ALIAS_GROUPS
) -> str | None:
    """
    Map a matched alias back to the name of its group.

    Examples:
        "teaspoons" -> "tsp"
        "rkl" -> "tbsp"
        "lb." -> "lb"
    """
    for group in groups:
        if alias in group.aliases:
            return group.name
    return None
