"""Entry points that run an ingredient line through the whole tokenizer."""

from recipetokens.logging_config import get_logger
from recipetokens.normalize.substitutions import normalize
from recipetokens.tokenize.chunks import chunk
from recipetokens.tokenize.matcher import find_amounts
from recipetokens.tokenize.models import Chunk, IngredientTokens
from recipetokens.tokenize.resolver import resolve

logger = get_logger(__name__)


def get_tokens(ingredient: str) -> IngredientTokens:
    """
    Normalize an ingredient line and extract its amounts.

    Spans in ``amounts`` refer to ``transformed_ingredient``, not to the
    original string.
    """
    transformed = normalize(ingredient)
    amounts = tuple(resolve(raw) for raw in find_amounts(transformed))
    logger.debug(f"Found {len(amounts)} amounts in {transformed!r}")
    return IngredientTokens(
        ingredient=ingredient,
        transformed_ingredient=transformed,
        amounts=amounts,
    )


def tokenize_ingredient(ingredient: str) -> list[Chunk]:
    """Split the normalized ingredient line into chunks, tagging amount chunks."""
    tokens = get_tokens(ingredient)
    return chunk(tokens.transformed_ingredient, tokens.amounts)
