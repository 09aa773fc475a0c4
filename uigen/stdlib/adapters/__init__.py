"""Language model adapters."""

from uigen.stdlib.adapters.factory import get_language_model
from uigen.stdlib.adapters.mock import MockLanguageModel

__all__ = ["MockLanguageModel", "get_language_model"]
