"""Partition normalized text into chunks aligned with amount spans."""

from collections.abc import Sequence

from recipetokens.tokenize.models import Chunk, IngredientSlice


def split_points(text: str, slices: Sequence[IngredientSlice]) -> list[int]:
    """Every slice boundary strictly inside the text, ascending and unique."""
    points = set()
    for ingredient_slice in slices:
        points.update(ingredient_slice.text_slice)
    return sorted(point for point in points if 0 < point < len(text))


def _token_at(offset: int, slices: Sequence[IngredientSlice]) -> IngredientSlice | None:
    for ingredient_slice in slices:
        if ingredient_slice.text_slice.contains(offset):
            return ingredient_slice
    return None


def chunk(text: str, slices: Sequence[IngredientSlice]) -> list[Chunk]:
    """
    Cut ``text`` at every slice boundary and tag the pieces that fall inside a slice.

    Joining the chunk texts gives back ``text`` exactly. Adjacent slices with
    no gap between them still produce separate chunks. Each chunk carries the
    first slice containing its starting offset, or None.
    """
    if not text:
        return []

    bounds = [0, *split_points(text, slices), len(text)]
    return [
        Chunk(text=text[start:end], token=_token_at(start, slices))
        for start, end in zip(bounds, bounds[1:])
    ]
