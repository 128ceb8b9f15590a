"""
Prediction module for matching filenames to pattern groups and suggesting values.
"""

from .matcher import MatchResult, PatternMatcher
from .models import (
    EditableFilename,
    ElementKind,
    ElementSuggestions,
    NamePrediction,
    OrdinalPrediction,
    PatternInfo,
    PositionInfo,
    PositionSuggestions,
    Suggestion,
    SuggestionMode,
    SuggestionReason,
    ValueFrequency,
)
from .predictor import Predictor
from .reconstructor import NameLayout, reconstruct
from .suggestions import SuggestionGenerator

__all__ = [
    "EditableFilename",
    "ElementKind",
    "ElementSuggestions",
    "MatchResult",
    "NameLayout",
    "NamePrediction",
    "OrdinalPrediction",
    "PatternInfo",
    "PatternMatcher",
    "PositionInfo",
    "PositionSuggestions",
    "Predictor",
    "Suggestion",
    "SuggestionGenerator",
    "SuggestionMode",
    "SuggestionReason",
    "ValueFrequency",
    "reconstruct",
]
