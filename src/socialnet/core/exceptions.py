"""Custom exceptions for SocialNet.

All SocialNet-specific exceptions inherit from SocialNetError. The graph
core itself never raises them for domain conditions such as unknown
people; they cover configuration and command input only.
"""


class SocialNetError(Exception):
    """Base exception for SocialNet errors."""

    pass


class ConfigError(SocialNetError):
    """Error during configuration loading.

    Raised when the config file has invalid TOML syntax
    or a setting holds a value outside its allowed range.
    """

    pass


class ScriptError(SocialNetError):
    """Error while executing a command script.

    Raised for unknown commands, wrong argument counts and,
    in strict mode, for operations that changed nothing.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
