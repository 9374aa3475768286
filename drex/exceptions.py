"""Custom exceptions for drex."""


class DrexError(Exception):
    """Base exception for all dice errors."""

    def __init__(self, message: str = "An error occurred") -> None:
        """Initialize exception with message.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(self.message)


class ParseError(DrexError):
    """Dice expression does not follow the NdM / integer grammar."""

    def __init__(
        self,
        message: str,
        expression: str | None = None,
        position: int | None = None,
    ) -> None:
        """Initialize parse error.

        Args:
            message: Error message describing what was expected
            expression: Expression that failed to parse
            position: Index into the whitespace-stripped expression
        """
        self.expression = expression
        self.position = position
        super().__init__(message)


class RangeError(DrexError):
    """Range roll requested with a lower bound above the upper bound."""

    def __init__(self, low: int, high: int) -> None:
        """Initialize range error.

        Args:
            low: Requested lower bound
            high: Requested upper bound
        """
        self.low = low
        self.high = high
        super().__init__(f"Invalid range: low ({low}) is greater than high ({high})")


class ConfigurationError(DrexError):
    """Configuration or environment error."""

    def __init__(self, message: str, config_key: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that caused the error
        """
        self.config_key = config_key
        super().__init__(message)
