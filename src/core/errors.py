"""Custom exception hierarchy for SportsPA."""

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."


class SportsPaError(Exception):
    """Base error type."""


class ParseError(SportsPaError):
    """Raised when user input cannot be turned into a command."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FormatError(ParseError):
    """Structural problem with the arguments of a command."""

    def __init__(self, usage: str) -> None:
        super().__init__(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))
        self.usage = usage


class ValidationError(ParseError):
    """A field value does not satisfy the constraints of its type."""
    pass


class InvalidIndexError(ParseError):
    """Raised when an index is not a non-zero unsigned integer."""

    def __init__(self, message: str = MESSAGE_INVALID_INDEX) -> None:
        super().__init__(message)


class SemanticError(ParseError):
    """Input is well formed but meaningless for the command."""
    pass


class UnknownCommandError(ParseError):
    def __init__(self, message: str = MESSAGE_UNKNOWN_COMMAND) -> None:
        super().__init__(message)


class CommandError(SportsPaError):
    """Raised when a parsed command cannot be executed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(SportsPaError):
    pass
