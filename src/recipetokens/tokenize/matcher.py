"""Scanner that finds `<number>[-<number>] <unit>` amounts in normalized text."""

import re

from recipetokens.normalize.units import UNIT_ALIAS_GROUPS, UnitAliasGroup, iter_aliases
from recipetokens.tokenize.models import RawMatch, TextSpan

# ASCII digits with an optional dot decimal part, optionally followed by a second
# number of the same shape after a dash. Comma decimals are not recognised.
NUMBER_PATTERN = re.compile(r"[0-9]+\.?[0-9]*(?:\s*-\s*[0-9]+\.?[0-9]*)?")
_WHITESPACE = re.compile(r"\s*")


def _continues_word(text: str, pos: int) -> bool:
    return pos < len(text) and text[pos].isalpha()


def match_unit(
    text: str, pos: int, groups: tuple[UnitAliasGroup, ...] = UNIT_ALIAS_GROUPS
) -> str | None:
    """
    Return the first alias that starts at ``pos`` and is not followed by a letter.

    The letter guard keeps "4 garlics" from being read as "4 g" + "arlics",
    and lets "teaspoons" win over its own prefix "teaspoon".
    """
    for alias in iter_aliases(groups):
        if text.startswith(alias, pos) and not _continues_word(text, pos + len(alias)):
            return alias
    return None


def match_at(
    text: str, pos: int, groups: tuple[UnitAliasGroup, ...] = UNIT_ALIAS_GROUPS
) -> RawMatch | None:
    """Try to read one amount starting exactly at ``pos``."""
    number = NUMBER_PATTERN.match(text, pos)
    if number is None:
        return None

    unit_start = _WHITESPACE.match(text, number.end()).end()
    unit = match_unit(text, unit_start, groups)
    if unit is None:
        return None

    return RawMatch(
        span=TextSpan(pos, unit_start + len(unit)),
        number=number.group(0),
        unit=unit,
    )


def find_amounts(
    text: str, groups: tuple[UnitAliasGroup, ...] = UNIT_ALIAS_GROUPS
) -> list[RawMatch]:
    """
    Scan ``text`` left to right for non-overlapping amounts.

    A failed attempt moves on by a single character, so an amount may start
    in the middle of a longer run of digits ("1.2.3 g" yields "2.3 g").

    Examples:
        "2 g salt" -> [RawMatch(span=(0, 3), number="2", unit="g")]
        "3-4 dl water" -> [RawMatch(span=(0, 6), number="3-4", unit="dl")]
        "4 garlics" -> []
    """
    matches: list[RawMatch] = []
    pos = 0
    while pos < len(text):
        found = match_at(text, pos, groups)
        if found is None:
            pos += 1
            continue
        matches.append(found)
        pos = found.span.end
    return matches
