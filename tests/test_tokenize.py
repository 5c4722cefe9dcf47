"""Tests for chunk assembly and the get_tokens/tokenize_ingredient entry points."""

import pytest

from recipetokens import get_tokens, tokenize_ingredient
from recipetokens.tokenize.chunks import chunk, split_points
from recipetokens.tokenize.models import Chunk, NumberRange, TextSpan

# =============================================================================
# Chunk Assembly Tests
# =============================================================================


class TestChunk:
    """Tests for the chunk function."""

    def test_amount_then_prose(self, make_slice):
        amount = make_slice(0, 3, 2.0, "g")
        chunks = chunk("2 g salt", [amount])
        assert chunks == [Chunk("2 g", amount), Chunk(" salt", None)]

    def test_prose_then_amount_at_end(self, make_slice):
        """Test that an amount ending the text leaves no empty trailing chunk."""
        amount = make_slice(5, 8)
        chunks = chunk("salt 2 g", [amount])
        assert chunks == [Chunk("salt ", None), Chunk("2 g", amount)]

    def test_adjacent_slices(self, make_slice):
        """Test that touching slices still produce one chunk each."""
        first = make_slice(0, 3, 2.0, "g")
        second = make_slice(3, 7, 3.0, "dl")
        chunks = chunk("2 g3 dl", [first, second])
        assert chunks == [Chunk("2 g", first), Chunk("3 dl", second)]

    def test_amount_in_the_middle(self, make_slice):
        amount = make_slice(4, 8, 1.0, "cup")
        chunks = chunk("add 1cup of milk", [amount])
        assert [c.text for c in chunks] == ["add ", "1cup", " of milk"]
        assert [c.is_amount for c in chunks] == [False, True, False]

    def test_no_slices(self):
        assert chunk("salt", []) == [Chunk("salt", None)]

    def test_empty_text(self):
        assert chunk("", []) == []

    def test_split_points_exclude_text_edges(self, make_slice):
        slices = [make_slice(0, 3), make_slice(5, 8)]
        assert split_points("2 g, 3 g", slices) == [3, 5]


# =============================================================================
# Entry Point Tests
# =============================================================================


class TestGetTokens:
    """Tests for get_tokens."""

    def test_scalar_extraction(self):
        tokens = get_tokens("2 g salt")
        assert len(tokens.amounts) == 1

        amount = tokens.amounts[0]
        assert amount.ingredient.amount == 2
        assert amount.ingredient.unit == "g"
        assert amount.text_slice == TextSpan(0, 3)
        start, end = amount.text_slice
        assert tokens.transformed_ingredient[start:end] == "2 g"

    def test_range_extraction(self):
        ingredient = get_tokens("3-4 dl water").amounts[0].ingredient
        assert ingredient.amount == NumberRange(3, 4)
        assert ingredient.amount == (3, 4)
        assert ingredient.unit == "dl"

    def test_boundary_guard(self):
        assert get_tokens("4 garlics").amounts == ()

    def test_fraction_normalization(self):
        assert get_tokens("½ cup sugar").transformed_ingredient.startswith("0.5")

    def test_compound_fraction_folding(self):
        tokens = get_tokens("1 ½ cup flour")
        assert tokens.transformed_ingredient.startswith("1.5")
        assert tokens.amounts[0].ingredient.amount == 1.5
        assert tokens.amounts[0].text_slice == TextSpan(0, 7)

    def test_original_ingredient_is_kept(self):
        tokens = get_tokens("1 ½ cup flour")
        assert tokens.ingredient == "1 ½ cup flour"

    def test_spans_refer_to_normalized_text(self):
        """Test that offsets are measured after substitution."""
        tokens = get_tokens("flour 1 1/2 cups")
        assert tokens.transformed_ingredient == "flour 1.5 cups"
        assert tokens.amounts[0].text_slice == TextSpan(6, 14)

    def test_amounts_are_ordered(self, sample_ingredient_lines):
        for line in sample_ingredient_lines:
            starts = [a.text_slice.start for a in get_tokens(line).amounts]
            assert starts == sorted(starts)

    def test_several_amounts(self):
        tokens = get_tokens("1 1/2 cups milk, 2-3 tbsp butter")
        assert tokens.transformed_ingredient == "1.5 cups milk, 2-3 tbsp butter"
        assert [a.ingredient.unit for a in tokens.amounts] == ["cups", "tbsp"]
        assert tokens.amounts[1].ingredient.amount == NumberRange(2, 3)


class TestTokenizeIngredient:
    """Tests for tokenize_ingredient."""

    def test_token_attachment(self):
        chunks = tokenize_ingredient("2 g salt")
        assert len(chunks) == 2

        assert chunks[0].text == "2 g"
        assert chunks[0].token is not None
        assert chunks[0].token.ingredient.amount == 2
        assert chunks[0].token.ingredient.unit == "g"

        assert chunks[1].text == " salt"
        assert chunks[1].token is None

    def test_no_amount_gives_single_chunk(self):
        chunks = tokenize_ingredient("salt and pepper to taste")
        assert chunks == [Chunk("salt and pepper to taste", None)]

    def test_mixed_line(self):
        chunks = tokenize_ingredient("1 ½ cups flour, 2-3 tbsp sugar")
        assert [c.text for c in chunks] == ["1.5 cups", " flour, ", "2-3 tbsp", " sugar"]
        assert [c.is_amount for c in chunks] == [True, False, True, False]

    @pytest.mark.parametrize(
        "line",
        ["2 g salt", "3-4 dl water", "1 ½ cup flour", "4 garlics", "salt 2 g", "2 g3 dl", ""],
    )
    def test_lossless_partition(self, line):
        """Test that the chunks join back into the normalized text."""
        joined = "".join(c.text for c in tokenize_ingredient(line))
        assert joined == get_tokens(line).transformed_ingredient

    def test_lossless_partition_for_samples(self, sample_ingredient_lines):
        for line in sample_ingredient_lines:
            joined = "".join(c.text for c in tokenize_ingredient(line))
            assert joined == get_tokens(line).transformed_ingredient

    def test_every_amount_has_a_chunk(self, sample_ingredient_lines):
        for line in sample_ingredient_lines:
            tokens = get_tokens(line)
            tagged = [c.token for c in tokenize_ingredient(line) if c.token is not None]
            assert tagged == list(tokens.amounts)
