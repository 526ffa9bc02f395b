"""Error types for the training-calendar core.

Caller/data-integrity errors that are never retried. The HTTP layer turns
them into 400 responses.
"""


class InvalidArgumentError(ValueError):
    """Raised when a core function receives input it cannot work with.

    Covers malformed dates, negative week numbers, and phase lists that do not
    partition the plan's weeks.
    """

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        self.message = message or f"Invalid value for {argument}"
        super().__init__(self.message)
