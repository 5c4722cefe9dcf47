"""Extract amounts and units from recipe ingredient lines."""

from recipetokens.tokenize import get_tokens, tokenize_ingredient

__version__ = "0.1.0"

__all__ = ["get_tokens", "tokenize_ingredient"]
