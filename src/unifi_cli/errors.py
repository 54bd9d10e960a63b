"""Exception hierarchy shared by the config, API and filtering layers."""

from __future__ import annotations

from typing import Iterable, Optional


class UnifiError(Exception):
    """Base class for errors reported to the user by the CLI."""


class ConfigError(UnifiError):
    """Invalid flag combination or incomplete/unreadable configuration."""


class APIError(UnifiError):
    """Failure talking to the controller or decoding its response."""


class FilterError(UnifiError):
    """Base class for filter-engine failures."""


class FilterSyntaxError(FilterError):
    """Malformed WHERE-clause text.

    Attributes:
        fragment: Offending piece of the input (may be empty at end of input)
        position: Character offset of the fragment in the original text
    """

    def __init__(self, message: str, fragment: str = "", position: int = 0):
        self.fragment = fragment
        self.position = position
        if fragment:
            message = f"{message} near '{fragment}' (position {position})"
        else:
            message = f"{message} at end of input"
        super().__init__(message)


class FilterSemanticError(FilterError):
    """Well-formed expression that references fields incorrectly."""


class UnknownFieldError(FilterSemanticError):
    """Expression references a field outside the client schema."""

    def __init__(self, field: str, valid_fields: Iterable[str]):
        self.field = field
        self.valid_fields = sorted(valid_fields)
        super().__init__(
            f"unknown field '{field}' "
            f"(valid fields: {', '.join(self.valid_fields)})"
        )


class FilterTypeError(FilterSemanticError):
    """Operand types cannot be compared."""

    def __init__(self, field: str, expected: str, actual: str, detail: str = ""):
        self.field = field
        self.expected = expected
        self.actual = actual
        message = f"type mismatch on '{field}': expected {expected}, got {actual}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class FilterApplyError(FilterError):
    """Wraps any filter-engine error raised while filtering a record set."""

    def __init__(self, cause: FilterError, where: Optional[str] = None):
        self.cause = cause
        self.where = where
        super().__init__(f"failed to apply filter: {cause}")


__all__ = [
    "APIError",
    "ConfigError",
    "FilterApplyError",
    "FilterError",
    "FilterSemanticError",
    "FilterSyntaxError",
    "FilterTypeError",
    "UnifiError",
    "UnknownFieldError",
]
