"""
Custom exceptions for passguard.
"""


class PassguardError(Exception):
    """Base exception for passguard errors"""
    pass


class NullArgumentError(PassguardError, TypeError):
    """A required argument was None"""

    def __init__(self, name: str):
        super().__init__(f"Argument '{name}' must not be None")
        self.name = name


class CharsetError(PassguardError):
    """No valid password can be built from the configured charset"""
    pass


class ConfigValidationError(PassguardError, ValueError):
    """One or more configuration values are out of range"""

    def __init__(self, fields: dict):
        self.fields = dict(fields)
        details = ", ".join(
            f"{name}={value!r} (allowed {low}-{high})"
            for name, (value, low, high) in self.fields.items()
        )
        super().__init__(f"Invalid configuration: {details}")


class WordListsNotLoadedError(PassguardError):
    """Classification was requested before word lists were loaded"""
    pass


class WordListError(PassguardError):
    """Error reading a word list file"""
    pass
