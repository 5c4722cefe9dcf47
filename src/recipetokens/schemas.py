"""Response and request schemas for the ingredient tokenizer API."""

import math

from pydantic import BaseModel, Field

from recipetokens.tokenize.models import Chunk, IngredientSlice, IngredientTokens, NumberRange


def _finite(value: float) -> float | None:
    # JSON has no nan; unparsable amounts are reported as null.
    return None if math.isnan(value) else value


class AmountRange(BaseModel):
    """Range amount such as "3-4 dl"."""

    start: float | None
    end: float | None


class Amount(BaseModel):
    """Amount and unit recognised in an ingredient line."""

    amount: float | AmountRange | None
    unit: str
    canonical_unit: str | None = None


class Slice(BaseModel):
    """Amount with its half-open character span in the transformed ingredient."""

    start: int
    end: int
    ingredient: Amount

    @classmethod
    def from_slice(cls, ingredient_slice: IngredientSlice) -> "Slice":
        amount = ingredient_slice.ingredient
        if isinstance(amount.amount, NumberRange):
            value: float | AmountRange | None = AmountRange(
                start=_finite(amount.amount.start),
                end=_finite(amount.amount.end),
            )
        else:
            value = _finite(amount.amount)

        return cls(
            start=ingredient_slice.text_slice.start,
            end=ingredient_slice.text_slice.end,
            ingredient=Amount(
                amount=value,
                unit=amount.unit,
                canonical_unit=amount.canonical_unit,
            ),
        )


class ChunkSchema(BaseModel):
    """Piece of the transformed ingredient, with the amount it belongs to if any."""

    text: str
    token: Slice | None = None

    @classmethod
    def from_chunk(cls, chunk: Chunk) -> "ChunkSchema":
        token = Slice.from_slice(chunk.token) if chunk.token is not None else None
        return cls(text=chunk.text, token=token)


# Request/Response schemas
class IngredientRequest(BaseModel):
    """A single ingredient line."""

    ingredient: str


class RecipeIngredientsRequest(BaseModel):
    """All ingredient lines of a recipe, one string per line."""

    ingredients: list[str] = Field(default_factory=list)


class IngredientTokensResponse(BaseModel):
    """Amounts extracted from one ingredient line."""

    ingredient: str
    transformed_ingredient: str
    amounts: list[Slice]

    @classmethod
    def from_tokens(cls, tokens: IngredientTokens) -> "IngredientTokensResponse":
        return cls(
            ingredient=tokens.ingredient,
            transformed_ingredient=tokens.transformed_ingredient,
            amounts=[Slice.from_slice(s) for s in tokens.amounts],
        )


class IngredientChunksResponse(BaseModel):
    """Chunks of one ingredient line, ready for rendering."""

    ingredient: str
    chunks: list[ChunkSchema]


class RecipeChunksResponse(BaseModel):
    """Chunks for every ingredient line of a recipe, in input order."""

    ingredients: list[IngredientChunksResponse]
    total: int
