"""Custom exceptions for ghactivity."""


class ActivityError(Exception):
    """Base exception for all ghactivity errors."""


class InvalidDateFormat(ActivityError, ValueError):
    """Raised when a date string is not a real ``DD-MM-YYYY`` calendar date."""

    def __init__(self, value: str, reason: str = "expected DD-MM-YYYY"):
        self.value = value
        self.reason = reason
        super().__init__(f"invalid date format: {value!r} ({reason})")


class ConfigError(ActivityError):
    """Raised when an environment setting cannot be parsed."""


class UserRequiredError(ActivityError):
    """Raised when no GitHub login was given and none is configured."""


class InvalidLogin(ActivityError, ValueError):
    """Raised when a user name is not a well-formed GitHub login."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid GitHub login: {value!r}")
