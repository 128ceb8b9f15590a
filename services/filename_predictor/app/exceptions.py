"""Custom exceptions for the filename predictor."""


class FilenamePredictorError(Exception):
    """Base exception for all filename predictor errors.

    Parsing, model building and prediction never raise for well-formed
    string input, so in practice this hierarchy is only reached through
    reconstruction.

    Example:
        >>> try:
        ...     layout.reconstruct(values)
        ... except FilenamePredictorError as e:
        ...     logger.error(f"Could not rebuild filename: {e}")
    """


class ArgumentCountError(FilenamePredictorError, ValueError):
    """Raised when a reconstruction receives the wrong number of values.

    The number of new values must equal the number of visible
    (non-separator, non-extension) components of the parsed filename.

    Example:
        >>> layout = NameLayout.from_parsed(tokenizer.parse("IMG_001.jpg"))
        >>> layout.reconstruct(["IMG", "002", "extra"])
        Traceback (most recent call last):
        ...
        ArgumentCountError: Expected 2 values, got 3
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} values, got {actual}")
