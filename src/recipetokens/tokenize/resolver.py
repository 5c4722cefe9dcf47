"""Turn raw amount matches into scalar or range amounts."""

from recipetokens.logging_config import get_logger
from recipetokens.tokenize.models import IngredientAmount, IngredientSlice, NumberRange, RawMatch

logger = get_logger(__name__)


def parse_number(text: str) -> float:
    """Parse a captured number, yielding nan instead of raising on bad input."""
    try:
        return float(text.strip())
    except ValueError:
        logger.debug(f"Could not parse amount {text!r}, using nan")
        return float("nan")


def resolve(raw: RawMatch) -> IngredientSlice:
    """
    Build the amount for a raw match.

    A capture containing a dash becomes a NumberRange with its bounds in
    written order, even when the first is larger. The unit stays the exact
    alias that matched; use ``IngredientAmount.canonical_unit`` for the group.
    """
    if "-" in raw.number:
        start, end = raw.number.strip().split("-", 1)
        amount: float | NumberRange = NumberRange(parse_number(start), parse_number(end))
    else:
        amount = parse_number(raw.number)

    return IngredientSlice(
        text_slice=raw.span,
        ingredient=IngredientAmount(amount=amount, unit=raw.unit),
    )
