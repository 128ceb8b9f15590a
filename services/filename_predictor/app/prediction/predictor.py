"""Prediction entry points combining group matching and suggestion generation."""

import logging

from services.filename_predictor.app.config import Settings, get_settings
from services.filename_predictor.app.model.models import Model, PatternGroup
from services.filename_predictor.app.tokenizer import ParsedName, Tokenizer

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
    SuggestionMode,
    ValueFrequency,
)
from .reconstructor import NameLayout
from .suggestions import SuggestionGenerator

logger = logging.getLogger(__name__)

MAX_EXAMPLES = 3


def force_first(suggestions: list[str], value: str) -> list[str]:
    """Move value to the front of suggestions, adding it if absent."""
    if suggestions and suggestions[0] == value:
        return suggestions
    return [value] + [s for s in suggestions if s != value]


def parse_ordinal(ordinal: int | str) -> int:
    """Accept an integer or a numeric string; anything else addresses ordinal 0."""
    if isinstance(ordinal, int):
        return ordinal
    try:
        return int(ordinal.strip())
    except (AttributeError, ValueError):
        return 0


class Predictor:
    """Answers 'what should go here' queries against a built model."""

    def __init__(self, settings: Settings | None = None, tokenizer: Tokenizer | None = None) -> None:
        """
        Initialize the predictor.

        Args:
            settings: Engine settings, defaults to the cached global settings
            tokenizer: Tokenizer for query filenames, created from settings if omitted
        """
        self.settings = settings or get_settings()
        self.tokenizer = tokenizer or Tokenizer(self.settings)
        self.matcher = PatternMatcher()
        self.generator = SuggestionGenerator(self.settings)

    def predict_by_name(self, model: Model, filename: str) -> NamePrediction:
        """
        Predict scored suggestions for every position of the group matching a filename.

        Args:
            model: Model to predict from
            filename: Query filename

        Returns:
            NamePrediction; unmatched queries carry their own signature and no positions
        """
        query = self.tokenizer.parse(filename)
        match = self.matcher.best_match(query, model)

        if match is None or not match.is_confident:
            self._log_no_match(query, match)
            return NamePrediction(
                signature=query.signature,
                matched=False,
                score=match.score if match else None,
            )

        positions = [
            PositionSuggestions(
                position=stats.position,
                role=stats.role,
                suggestions=self.generator.generate(stats, mode=SuggestionMode.SCORED),
            )
            for stats in match.group.position_stats
        ]
        return NamePrediction(
            signature=match.group.signature,
            matched=True,
            score=match.score,
            positions=positions,
        )

    def predict_by_ordinal(self, model: Model, ordinal: int | str) -> OrdinalPrediction:
        """
        Predict plain-ordered suggestions for the file at an ordinal of the first group.

        An ordinal past the end of the list uses the last file as reference and
        keeps the natural ordering (next index first when the reference holds
        the maximum). An ordinal addressing an existing file always puts that
        file's value first.

        Args:
            model: Model to predict from
            ordinal: Index into the first group's file list (int or numeric string)

        Returns:
            OrdinalPrediction with one entry per visible element
        """
        position = parse_ordinal(ordinal)
        if model.is_empty:
            return OrdinalPrediction(ordinal=position)

        group = model.groups[0]
        files = group.files
        beyond_list = position >= len(files)
        reference = files[position] if 0 <= position < len(files) else files[-1]

        elements = []
        for element_index, stats in enumerate(group.visible_stats):
            component = reference.component_at(stats.position)
            current_value = component.value if component else None
            suggestions = self.generator.values(stats, current_value, SuggestionMode.PLAIN)
            if not beyond_list and current_value is not None:
                suggestions = force_first(suggestions, current_value)

            elements.append(
                ElementSuggestions(
                    element_index=element_index,
                    position=stats.position,
                    kind=ElementKind.for_role(stats.role),
                    current_value=current_value,
                    suggestions=suggestions,
                )
            )

        return OrdinalPrediction(
            signature=group.signature,
            ordinal=position,
            beyond_list=beyond_list,
            elements=elements,
        )

    def get_element_suggestions(self, model: Model, filename: str, element_index: int) -> list[str]:
        """
        Get plain-ordered suggestions for one visible element of a filename.

        Args:
            model: Model to predict from
            filename: Query filename
            element_index: Index among non-separator, non-extension components

        Returns:
            Suggestions, most likely first; empty when the element does not exist
            or the matched group never reaches its position
        """
        if model.is_empty:
            return []

        query = self.tokenizer.parse(filename)
        visible = query.visible_components
        if not 0 <= element_index < len(visible):
            return []

        component = visible[element_index]
        match = self.matcher.best_match(query, model)
        if match is None or not match.is_confident:
            self._log_no_match(query, match)
            return [component.value]

        return self._element_values(match.group, query, component.position, component.value)

    def get_all_position_values(self, model: Model, filename: str, position: int) -> list[ValueFrequency]:
        """
        List every value observed at a raw position of the group matching a filename.

        Args:
            model: Model to search
            filename: Query filename used to pick the group
            position: Raw component position

        Returns:
            Values with frequencies, most frequent first
        """
        match = self._confident_match(model, filename)
        if match is None:
            return []

        stats = match.group.stats_at(position)
        if stats is None:
            return []
        return [ValueFrequency(value=value, frequency=count) for value, count in stats.ranked_values()]

    def get_pattern_positions(self, model: Model, filename: str) -> list[PositionInfo]:
        """
        Describe every position of the group matching a filename.

        Args:
            model: Model to search
            filename: Query filename used to pick the group

        Returns:
            Position metadata in position order
        """
        match = self._confident_match(model, filename)
        if match is None:
            return []

        return [
            PositionInfo(
                position=stats.position,
                type=stats.type,
                role=stats.role,
                format=stats.format,
                value_count=len(stats.distinct_values),
                example_values=list(stats.distinct_values)[:MAX_EXAMPLES],
            )
            for stats in match.group.position_stats
        ]

    def get_all_patterns(self, model: Model) -> list[PatternInfo]:
        """Summarize every pattern group of a model, in model order."""
        return [
            PatternInfo(
                signature=group.signature.canonical,
                file_count=group.file_count,
                example_files=[f.original for f in group.files[:MAX_EXAMPLES]],
            )
            for group in model.groups
        ]

    def parse_current_filename(self, model: Model, filename: str) -> EditableFilename:
        """
        Parse a filename and attach suggestions to each visible element.

        Args:
            model: Model to predict from
            filename: Filename being edited

        Returns:
            EditableFilename that can rebuild the name from picked values
        """
        query = self.tokenizer.parse(filename)
        layout = NameLayout.from_parsed(query)
        match = self.matcher.best_match(query, model)
        group = match.group if match is not None and match.is_confident else None

        components = []
        for element_index, component in enumerate(query.visible_components):
            stats = group.stats_at(component.position) if group else None
            if group is not None:
                suggestions = self._element_values(group, query, component.position, component.value)
            else:
                suggestions = [component.value]

            components.append(
                ElementSuggestions(
                    element_index=element_index,
                    position=component.position,
                    kind=ElementKind.for_role(stats.role if stats else None),
                    current_value=component.value,
                    suggestions=suggestions or [component.value],
                )
            )

        return EditableFilename(
            original=filename,
            extension=layout.extension,
            components=components,
            layout=layout,
        )

    def _element_values(self, group: PatternGroup, query: ParsedName, position: int, current_value: str) -> list[str]:
        stats = group.stats_at(position)
        if stats is None:
            return []
        suggestions = self.generator.values(stats, current_value, SuggestionMode.PLAIN)
        if group.contains(query.original):
            return force_first(suggestions, current_value)
        return suggestions

    def _confident_match(self, model: Model, filename: str) -> MatchResult | None:
        query = self.tokenizer.parse(filename)
        match = self.matcher.best_match(query, model)
        if match is None or not match.is_confident:
            self._log_no_match(query, match)
            return None
        return match

    @staticmethod
    def _log_no_match(query: ParsedName, match: MatchResult | None) -> None:
        if match is None:
            logger.warning(f"No pattern groups available for {query.original!r}")
        else:
            logger.warning(
                f"No confident match for {query.original!r}: best score {match.score} "
                f"for {match.group.signature.canonical}"
            )
