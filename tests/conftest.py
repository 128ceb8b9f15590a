"""Pytest configuration and fixtures."""

import pytest

from services.filename_predictor.app.config import Settings, get_settings
from services.filename_predictor.app.model import ModelBuilder
from services.filename_predictor.app.prediction import Predictor
from services.filename_predictor.app.tokenizer import Tokenizer


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the process environment cache."""
    return Settings()


@pytest.fixture
def tokenizer(settings: Settings) -> Tokenizer:
    """Tokenizer built from default settings."""
    return Tokenizer(settings)


@pytest.fixture
def builder(settings: Settings, tokenizer: Tokenizer) -> ModelBuilder:
    """Model builder sharing the tokenizer fixture."""
    return ModelBuilder(settings, tokenizer=tokenizer)


@pytest.fixture
def predictor(settings: Settings, tokenizer: Tokenizer) -> Predictor:
    """Predictor sharing the tokenizer fixture."""
    return Predictor(settings, tokenizer=tokenizer)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure environment changes in one test never leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
