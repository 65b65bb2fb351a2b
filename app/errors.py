"""Application errors."""


class ConfigurationError(Exception):
    """Analysis option out of range."""

    def __init__(self, message: str = "Invalid configuration"):
        self.message = message
        super().__init__(self.message)


def require(condition: bool, message: str) -> None:
    """Raise ConfigurationError unless condition holds."""
    if not condition:
        raise ConfigurationError(message)
