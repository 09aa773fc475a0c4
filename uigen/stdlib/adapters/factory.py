"""Language model selection.

The scripted mock is the only model shipped; a provider key in the
environment is noticed and reported but never used for network calls.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from uigen.kernel.logging import get_logger
from uigen.stdlib.adapters.mock.mock_llm import MockLanguageModel

if TYPE_CHECKING:
    from uigen.kernel.config.models import UIGenConfig
    from uigen.kernel.ports.llm import LanguageModel

logger = get_logger(__name__)

PROVIDER_KEY_ENV = "ANTHROPIC_API_KEY"


def has_provider_key() -> bool:
    """Return True if a non-blank provider API key is set."""
    return bool(os.getenv(PROVIDER_KEY_ENV, "").strip())


def get_language_model(config: UIGenConfig) -> LanguageModel:
    """Return the language model for *config*.

    Always the :class:`MockLanguageModel`, built from ``config.model``.
    """
    if has_provider_key():
        logger.warning(
            "{env} is set but no provider adapter is installed; using the mock model",
            env=PROVIDER_KEY_ENV,
        )
    else:
        logger.info("No {env} found, using the mock model", env=PROVIDER_KEY_ENV)
    return MockLanguageModel.from_config(config.model)


__all__ = ["PROVIDER_KEY_ENV", "get_language_model", "has_provider_key"]
