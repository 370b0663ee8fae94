class Match3Error(RuntimeError):
    """Base class for errors raised by the board engine itself."""


class CascadeLimitExceeded(Match3Error):
    """Raised when a resolve loop runs more passes than the board allows."""

    def __init__(self, passes: int):
        super().__init__(f"Board did not settle within {passes} resolve passes")
        self.passes = passes


class GeneratorExhausted(Match3Error):
    """Raised when an iterable-backed piece generator runs dry."""
