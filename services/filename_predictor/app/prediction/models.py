"""Data models for prediction results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from services.filename_predictor.app.tokenizer.models import RoleTag, Signature, TypeTag

from .reconstructor import NameLayout


class SuggestionMode(str, Enum):
    """Output shape of the suggestion generator."""

    SCORED = "scored"
    PLAIN = "plain-with-current"


class SuggestionReason(str, Enum):
    """Why a value was suggested."""

    NEXT_INDEX = "next-sequential-index"
    MISSING_INDEX = "fill-missing-index"
    CONSTANT = "constant"
    FREQUENT_VALUE = "frequent-value"
    CURRENT_VALUE = "current-value"


class ElementKind(str, Enum):
    """How a picker should treat an element."""

    PATTERN = "pattern"
    VALUE = "value"

    @classmethod
    def for_role(cls, role: RoleTag | None) -> "ElementKind":
        """Sequential indices and dates are patterns; everything else is a value."""
        if role in (RoleTag.INDEX, RoleTag.DATE):
            return cls.PATTERN
        return cls.VALUE


class Suggestion(BaseModel):
    """A candidate value for a position."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(description="Suggested component value")
    score: float | None = Field(default=None, ge=0.0, le=1.0, description="Likelihood score (scored mode only)")
    reason: SuggestionReason | None = Field(default=None, description="Reason code")


class PositionSuggestions(BaseModel):
    """Scored suggestions for one raw position of the matched group."""

    position: int = Field(ge=0, description="Raw component position")
    role: RoleTag = Field(description="Inferred role of the position")
    suggestions: list[Suggestion] = Field(default_factory=list, description="Suggestions, best first")


class NamePrediction(BaseModel):
    """Result of predicting from a filename."""

    signature: Signature = Field(description="Matched group signature, or the query's own when unmatched")
    matched: bool = Field(description="Whether a group matched with a non-negative score")
    score: int | None = Field(default=None, description="Winning match score, None without groups")
    positions: list[PositionSuggestions] = Field(default_factory=list, description="Per-position suggestions")


class ElementSuggestions(BaseModel):
    """Plain-ordered suggestions for one visible element."""

    element_index: int = Field(ge=0, description="Index among visible components")
    position: int = Field(ge=0, description="Raw component position")
    kind: ElementKind = Field(description="Pattern (index/date) or value element")
    current_value: str | None = Field(default=None, description="Value of the reference file")
    suggestions: list[str] = Field(default_factory=list, description="Suggestions, most likely first")


class OrdinalPrediction(BaseModel):
    """Result of predicting for an ordinal in the original file list."""

    signature: Signature | None = Field(default=None, description="Signature of the first group")
    ordinal: int = Field(description="Requested ordinal")
    beyond_list: bool = Field(default=False, description="Whether the ordinal is past the known files")
    elements: list[ElementSuggestions] = Field(default_factory=list, description="Per-element suggestions")


class ValueFrequency(BaseModel):
    """An observed value and how often it occurred."""

    value: str
    frequency: int = Field(ge=1)


class PositionInfo(BaseModel):
    """Metadata of one position of a pattern group."""

    position: int = Field(ge=0)
    type: TypeTag
    role: RoleTag
    format: str | None = None
    value_count: int = Field(ge=0, description="Number of distinct values observed")
    example_values: list[str] = Field(default_factory=list, description="Up to three observed values")


class PatternInfo(BaseModel):
    """Summary of one pattern group."""

    signature: str = Field(description="Canonical signature")
    file_count: int = Field(ge=1)
    example_files: list[str] = Field(default_factory=list, description="Up to three member filenames")


class EditableFilename(BaseModel):
    """A parsed filename prepared for editing in a picker UI."""

    original: str
    extension: str = Field(default="", description="Extension with its leading dot, or empty")
    components: list[ElementSuggestions] = Field(default_factory=list)
    layout: NameLayout

    def reconstruct_with(self, values: list[str]) -> str:
        """Rebuild the filename from new element values."""
        return self.layout.reconstruct(values)

    def reconstruct(self) -> str:
        """Rebuild the filename from its current values."""
        return self.layout.reconstruct(self.layout.values)
