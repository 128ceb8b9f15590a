"""
Main tokenizer implementation for filename analysis.
"""

import logging
import re
import threading
import time
from itertools import groupby
from typing import Any

from services.filename_predictor.app.config import Settings, get_settings

from .classifier import TokenClassifier
from .models import Component, ParsedName, TypeTag
from .signature import SignatureBuilder

logger = logging.getLogger(__name__)

EXTENSION_DOT = "."
CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


class Tokenizer:
    """Splits filenames into typed, positioned components."""

    def __init__(self, settings: Settings | None = None):
        """
        Initialize the tokenizer.

        Args:
            settings: Engine settings, defaults to the cached global settings
        """
        self.settings = settings or get_settings()
        self.classifier = TokenClassifier(self.settings)
        self.signature_builder = SignatureBuilder()
        self.enable_caching = self.settings.enable_parse_cache
        self.cache_size = self.settings.parse_cache_size
        self._lock = threading.Lock()  # guards _cache and _stats across build workers
        self._extension_pattern = re.compile(
            rf"[A-Za-z0-9]{{{self.settings.extension_min_length},{self.settings.extension_max_length}}}"
        )
        self._cache: dict[str, ParsedName] = {}
        self._stats = {
            "total_processed": 0,
            "cache_hits": 0,
            "total_time_ms": 0.0,
        }

    def parse(self, filename: str) -> ParsedName:
        """
        Parse a single filename.

        Args:
            filename: Filename to parse (no directory part)

        Returns:
            ParsedName with components and signature
        """
        if self.enable_caching:
            with self._lock:
                cached = self._cache.get(filename)
                if cached is not None:
                    self._stats["cache_hits"] += 1
                    return cached

        start_time = time.time()

        base, extension = self.split_extension(filename)
        raw_tokens = self.split_base(base)

        components: list[Component] = []
        for token in raw_tokens:
            components.append(self._make_component(token, len(components)))

        if extension is not None:
            components.append(self._make_component(EXTENSION_DOT, len(components), type_tag=TypeTag.SEP))
            components.append(self._make_component(extension, len(components), type_tag=TypeTag.EXT))

        result = ParsedName(
            original=filename,
            components=tuple(components),
            signature=self.signature_builder.build(components),
        )

        elapsed_ms = (time.time() - start_time) * 1000
        with self._lock:
            if self.enable_caching:
                # Oldest entry goes first once the cache is full
                while len(self._cache) >= self.cache_size:
                    del self._cache[next(iter(self._cache))]
                self._cache[filename] = result

            self._stats["total_processed"] += 1
            self._stats["total_time_ms"] += elapsed_ms

        return result

    def parse_batch(self, filenames: list[str]) -> list[ParsedName]:
        """Parse multiple filenames, preserving input order."""
        return [self.parse(f) for f in filenames]

    def split_extension(self, filename: str) -> tuple[str, str | None]:
        """
        Separate a trailing extension from the filename.

        The last dot only starts an extension when it is neither the first
        nor the last character and the remainder is a short alphanumeric run.

        Args:
            filename: Raw filename

        Returns:
            Tuple of (base, extension or None)
        """
        idx = filename.rfind(EXTENSION_DOT)
        if 0 < idx < len(filename) - 1:
            candidate = filename[idx + 1 :]
            if self._extension_pattern.fullmatch(candidate):
                return filename[:idx], candidate
        return filename, None

    def split_base(self, base: str) -> list[str]:
        """
        Split the base name into raw tokens.

        Separator characters become one-character tokens; every run between
        them is further split on camelCase and digit/non-digit boundaries.

        Args:
            base: Filename without its extension

        Returns:
            Raw tokens in emission order
        """
        tokens: list[str] = []
        current: list[str] = []

        for char in base:
            if char in self.classifier.separator_chars:
                if current:
                    tokens.extend(self.split_run("".join(current)))
                    current = []
                tokens.append(char)
            else:
                current.append(char)

        if current:
            tokens.extend(self.split_run("".join(current)))

        return tokens

    @staticmethod
    def split_run(run: str) -> list[str]:
        """
        Split a separator-free run into sub-tokens.

        Example: ``"myFile001A"`` becomes ``["my", "File", "001", "A"]``.
        """
        pieces = []
        for camel_piece in CAMEL_BOUNDARY.split(run):
            for _, chars in groupby(camel_piece, key=str.isdecimal):
                pieces.append("".join(chars))
        return pieces

    def _make_component(self, token: str, position: int, type_tag: TypeTag | None = None) -> Component:
        if type_tag is None:
            type_tag = self.classifier.classify(token)
        return Component(
            value=token,
            type=type_tag,
            role=self.classifier.initial_role(type_tag),
            position=position,
        )

    def get_statistics(self) -> dict[str, Any]:
        """Get tokenizer performance statistics."""
        with self._lock:
            processed = self._stats["total_processed"]
            return {
                "total_processed": processed,
                "cache_hits": self._stats["cache_hits"],
                "cache_size": len(self._cache),
                "average_time_ms": self._stats["total_time_ms"] / processed if processed > 0 else 0,
                "total_time_ms": self._stats["total_time_ms"],
            }

    def clear_cache(self) -> None:
        """Clear the parse cache."""
        with self._lock:
            self._cache.clear()
            self._stats["cache_hits"] = 0
        logger.debug("Tokenizer cache cleared")
