"""
Token classification into primitive type tags.
"""

from services.filename_predictor.app.config import Settings, get_settings

from .models import RoleTag, TypeTag

# int() and str() refuse more than 4300 digits by default
DIGIT_CHUNK = 4000
_CHUNK_BASE = 10**DIGIT_CHUNK


def is_digits(text: str) -> bool:
    """True if text is non-empty and made only of decimal digits.

    Decimal digits are Unicode category Nd, which is exactly what ``int()``
    accepts, so every digit run can be parsed without loss.
    """
    return text.isdecimal()


def parse_digits(text: str) -> int:
    """
    Parse a digit run of any length into an exact integer.

    Args:
        text: Non-empty run of decimal digits

    Returns:
        Integer value of the run
    """
    value = 0
    for start in range(0, len(text), DIGIT_CHUNK):
        chunk = text[start : start + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_digits(value: int) -> str:
    """Render an integer of any size as decimal digits."""
    if value < 0:
        return "-" + format_digits(-value)
    chunks = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(str(low).zfill(DIGIT_CHUNK))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def is_letters(text: str) -> bool:
    """True if text is non-empty and made only of letters."""
    return text.isalpha()


class TokenClassifier:
    """Classifies raw tokens into type tags and initial roles."""

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize the classifier.

        Args:
            settings: Engine settings, defaults to the cached global settings
        """
        self.settings = settings or get_settings()
        self.separator_chars = frozenset(self.settings.separator_chars)

    def is_separator(self, token: str) -> bool:
        """Check whether a token is a single separator character."""
        return len(token) == 1 and token in self.separator_chars

    def classify(self, token: str, is_extension: bool = False) -> TypeTag:
        """
        Classify a raw token.

        Args:
            token: Token text produced by the tokenizer
            is_extension: Whether the token is the detected extension

        Returns:
            Type tag for the token
        """
        if is_extension:
            return TypeTag.EXT
        if self.is_separator(token):
            return TypeTag.SEP
        if is_digits(token):
            if len(token) == self.settings.date_token_length:
                return TypeTag.DATE
            return TypeTag.NUMERIC
        if is_letters(token):
            return TypeTag.ALPHA
        return TypeTag.ALPHANUM

    @staticmethod
    def initial_role(type_tag: TypeTag) -> RoleTag:
        """Role a component carries straight out of parsing, before any group statistics."""
        if type_tag in (TypeTag.SEP, TypeTag.EXT):
            return RoleTag.CONSTANT
        if type_tag is TypeTag.DATE:
            return RoleTag.DATE
        return RoleTag.UNKNOWN
