"""Tests for language model selection."""

from __future__ import annotations

import pytest

from uigen.kernel.config.models import MockModelConfig, UIGenConfig
from uigen.stdlib.adapters.factory import get_language_model, has_provider_key
from uigen.stdlib.adapters.mock import MockLanguageModel


class TestGetLanguageModel:
    def test_without_key(self) -> None:
        model = get_language_model(UIGenConfig())
        assert isinstance(model, MockLanguageModel)
        assert has_provider_key() is False

    def test_blank_key_counts_as_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", "   ")
        assert has_provider_key() is False

    def test_with_key_still_mock(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        assert has_provider_key() is True
        assert isinstance(get_language_model(UIGenConfig()), MockLanguageModel)

    def test_uses_model_config(self) -> None:
        config = UIGenConfig(model=MockModelConfig(model_id="mock-x", delay_scale=0.0))
        model = get_language_model(config)
        assert model.model_id == "mock-x"
        assert isinstance(model, MockLanguageModel)
        assert model.delay_scale == 0.0
