"""API routes that tokenize recipe ingredient lines."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from recipetokens.config import Settings, get_settings
from recipetokens.logging_config import LoggingContext, get_logger
from recipetokens.schemas import (
    ChunkSchema,
    IngredientChunksResponse,
    IngredientRequest,
    IngredientTokensResponse,
    RecipeChunksResponse,
    RecipeIngredientsRequest,
)
from recipetokens.tokenize import get_tokens, tokenize_ingredient

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["ingredients"])

SettingsDep = Annotated[Settings, Depends(get_settings)]


def _check_length(ingredient: str, settings: Settings) -> None:
    if len(ingredient) > settings.max_ingredient_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f"Ingredient line is {len(ingredient)} characters long, "
                f"limit is {settings.max_ingredient_length}"
            ),
        )


def _chunks_response(ingredient: str) -> IngredientChunksResponse:
    return IngredientChunksResponse(
        ingredient=ingredient,
        chunks=[ChunkSchema.from_chunk(c) for c in tokenize_ingredient(ingredient)],
    )


@router.post("/ingredients/tokens", response_model=IngredientTokensResponse)
async def ingredient_tokens(
    request: IngredientRequest, settings: SettingsDep
) -> IngredientTokensResponse:
    """Extract the amounts of a single ingredient line."""
    _check_length(request.ingredient, settings)
    return IngredientTokensResponse.from_tokens(get_tokens(request.ingredient))


@router.post("/ingredients/chunks", response_model=IngredientChunksResponse)
async def ingredient_chunks(
    request: IngredientRequest, settings: SettingsDep
) -> IngredientChunksResponse:
    """Split a single ingredient line into display chunks."""
    _check_length(request.ingredient, settings)
    return _chunks_response(request.ingredient)


@router.post("/recipes/ingredients/chunks", response_model=RecipeChunksResponse)
async def recipe_ingredient_chunks(
    request: RecipeIngredientsRequest, settings: SettingsDep
) -> RecipeChunksResponse:
    """Split every ingredient line of a recipe into display chunks."""
    if len(request.ingredients) > settings.max_batch_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f"Recipe has {len(request.ingredients)} ingredient lines, "
                f"limit is {settings.max_batch_size}"
            ),
        )
    for ingredient in request.ingredients:
        _check_length(ingredient, settings)

    results = []
    for index, ingredient in enumerate(request.ingredients):
        with LoggingContext(ingredient_index=index):
            try:
                results.append(_chunks_response(ingredient))
            except Exception as e:
                logger.exception(f"Failed to tokenize ingredient line: {e}")
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Failed to tokenize ingredient line {index}",
                ) from e

    logger.info(f"Tokenized {len(results)} ingredient lines")
    return RecipeChunksResponse(ingredients=results, total=len(results))
