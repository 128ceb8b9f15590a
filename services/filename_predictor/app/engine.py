"""Functional surface of the filename predictor.

Each function delegates to a component configured from the cached global
settings. Hosts that need custom settings instantiate Tokenizer,
ModelBuilder and Predictor directly.
"""

from collections.abc import Iterable, Sequence
from functools import lru_cache

from services.filename_predictor.app.config import get_settings
from services.filename_predictor.app.model import Model, ModelBuilder
from services.filename_predictor.app.prediction import (
    EditableFilename,
    NameLayout,
    NamePrediction,
    OrdinalPrediction,
    PatternInfo,
    PositionInfo,
    Predictor,
    ValueFrequency,
)
from services.filename_predictor.app.prediction import reconstruct as _reconstruct
from services.filename_predictor.app.tokenizer import ParsedName, Tokenizer


@lru_cache
def _tokenizer() -> Tokenizer:
    return Tokenizer(get_settings())


@lru_cache
def _builder() -> ModelBuilder:
    return ModelBuilder(get_settings(), tokenizer=_tokenizer())


@lru_cache
def _predictor() -> Predictor:
    return Predictor(get_settings(), tokenizer=_tokenizer())


def parse(name: str) -> ParsedName:
    """Parse a filename into typed components and a signature."""
    return _tokenizer().parse(name)


def build_model(names: Iterable[str]) -> Model:
    """Group filenames by signature and compute per-position statistics."""
    return _builder().build(names)


def predict_by_name(model: Model, name: str) -> NamePrediction:
    """Scored suggestions for every position of the group best matching name."""
    return _predictor().predict_by_name(model, name)


def predict_by_ordinal(model: Model, ordinal: int | str) -> OrdinalPrediction:
    """Plain-ordered suggestions for the file at an ordinal of the first group."""
    return _predictor().predict_by_ordinal(model, ordinal)


def get_element_suggestions(model: Model, name: str, element_index: int) -> list[str]:
    """Plain-ordered suggestions for one visible element of name."""
    return _predictor().get_element_suggestions(model, name, element_index)


def get_all_position_values(model: Model, name: str, position: int) -> list[ValueFrequency]:
    """Every value observed at a raw position of the group best matching name."""
    return _predictor().get_all_position_values(model, name, position)


def get_pattern_positions(model: Model, name: str) -> list[PositionInfo]:
    """Metadata for every position of the group best matching name."""
    return _predictor().get_pattern_positions(model, name)


def get_all_patterns(model: Model) -> list[PatternInfo]:
    """Summary of every pattern group."""
    return _predictor().get_all_patterns(model)


def parse_current_filename(model: Model, name: str) -> EditableFilename:
    """Parse name and attach suggestions to each visible element."""
    return _predictor().parse_current_filename(model, name)


def reconstruct(original: ParsedName | NameLayout, new_values: Sequence[str]) -> str:
    """Rebuild a filename from new visible values, keeping separators and extension."""
    return _reconstruct(original, new_values)


__all__ = [
    "build_model",
    "get_all_patterns",
    "get_all_position_values",
    "get_element_suggestions",
    "get_pattern_positions",
    "parse",
    "parse_current_filename",
    "predict_by_name",
    "predict_by_ordinal",
    "reconstruct",
]
