"""Fraction substitution for raw ingredient lines."""

import re
from dataclasses import dataclass

from recipetokens.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SubstitutionRule:
    """Rewrite of a literal fraction into its decimal string."""

    surface: str
    decimal: str

    @property
    def pattern(self) -> re.Pattern[str]:
        # An optional whole number in front ("1 ½") is folded into the sum.
        # It may not continue a longer number such as the "5" of "0.5".
        return re.compile(rf"(?:(?<![\d.])\d+\s+)?{re.escape(self.surface)}")


# Applied first to last against the progressively rewritten text.
SUBSTITUTION_RULES: tuple[SubstitutionRule, ...] = (
    SubstitutionRule("½", "0.5"),
    SubstitutionRule("1/2", "0.5"),
    SubstitutionRule("¼", "0.25"),
    SubstitutionRule("1/4", "0.25"),
    SubstitutionRule("¾", "0.75"),
    SubstitutionRule("3/4", "0.75"),
)


def format_number(value: float) -> str:
    """Render a sum the way it should appear in the normalized text."""
    if value.is_integer():
        return str(int(value))
    return str(value)


def _fold(occurrence: str, rule: SubstitutionRule) -> str:
    with_decimals = " ".join(occurrence.split()).replace(rule.surface, rule.decimal, 1)
    return format_number(sum(float(piece) for piece in with_decimals.split()))


def normalize(
    text: str, rules: tuple[SubstitutionRule, ...] = SUBSTITUTION_RULES
) -> str:
    """
    Rewrite fraction glyphs and fraction literals into decimal numbers.

    Each occurrence found for a rule replaces only the first textual
    occurrence of the same substring in the working text, so repeated
    identical phrases are consumed one at a time in the order they were found.

    Examples:
        "½ cup sugar" -> "0.5 cup sugar"
        "1 ½ cup flour" -> "1.5 cup flour"
        "2 1/4 tsp salt" -> "2.25 tsp salt"
    """
    transformed = text
    for rule in rules:
        occurrences = [match.group(0) for match in rule.pattern.finditer(transformed)]
        for occurrence in occurrences:
            folded = _fold(occurrence, rule)
            transformed = transformed.replace(occurrence, folded, 1)
            logger.debug(f"Substituted {occurrence!r} -> {folded!r}")
    return transformed
