"""Value types produced by the ingredient tokenizer."""

import math
from dataclasses import dataclass
from typing import NamedTuple

from recipetokens.normalize.units import canonical_unit


class NumberRange(NamedTuple):
    """Two inclusive bounds, kept in the order they were written."""

    start: float
    end: float


class TextSpan(NamedTuple):
    """Half-open character offsets into the normalized text."""

    start: int
    end: int

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


@dataclass(frozen=True)
class IngredientAmount:
    """A scalar or range amount paired with the unit spelling that was matched."""

    amount: float | NumberRange
    unit: str

    @property
    def is_range(self) -> bool:
        return isinstance(self.amount, NumberRange)

    @property
    def is_valid(self) -> bool:
        """False when any bound failed to parse and came out as nan."""
        values = self.amount if self.is_range else (self.amount,)
        return not any(math.isnan(value) for value in values)

    @property
    def canonical_unit(self) -> str | None:
        return canonical_unit(self.unit)


@dataclass(frozen=True)
class RawMatch:
    """An amount pattern found in the text, before numbers are parsed."""

    span: TextSpan
    number: str
    unit: str


@dataclass(frozen=True)
class IngredientSlice:
    """Where an amount sits in the normalized text and what it resolved to."""

    text_slice: TextSpan
    ingredient: IngredientAmount


@dataclass(frozen=True)
class Chunk:
    """A contiguous piece of normalized text, tagged when it lies inside an amount."""

    text: str
    token: IngredientSlice | None = None

    @property
    def is_amount(self) -> bool:
        return self.token is not None


@dataclass(frozen=True)
class IngredientTokens:
    """Everything extracted from one ingredient line."""

    ingredient: str
    transformed_ingredient: str
    amounts: tuple[IngredientSlice, ...]
