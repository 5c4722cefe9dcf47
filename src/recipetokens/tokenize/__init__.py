"""Amount matching, resolution and chunking for ingredient lines."""

from recipetokens.tokenize.chunks import chunk
from recipetokens.tokenize.matcher import find_amounts
from recipetokens.tokenize.models import (
    Chunk,
    IngredientAmount,
    IngredientSlice,
    IngredientTokens,
    NumberRange,
    RawMatch,
    TextSpan,
)
from recipetokens.tokenize.pipeline import get_tokens, tokenize_ingredient
from recipetokens.tokenize.resolver import resolve

__all__ = [
    "Chunk",
    "IngredientAmount",
    "IngredientSlice",
    "IngredientTokens",
    "NumberRange",
    "RawMatch",
    "TextSpan",
    "chunk",
    "find_amounts",
    "get_tokens",
    "resolve",
    "tokenize_ingredient",
]
