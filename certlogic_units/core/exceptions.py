# certlogic_units/core/exceptions.py


class CertLogicUnitsError(Exception):
    """Base class for errors raised by certlogic_units."""


class InvalidTimeUnit(CertLogicUnitsError, ValueError):
    """
    The given string is not the canonical name of a time unit.

    The offending input is kept in ``name`` for diagnostics.
    """

    def __init__(self, name, valid_names=None):
        self.name = name
        message = f"Invalid time unit: {name!r}"
        if valid_names:
            message += f". Must be one of: {', '.join(valid_names)}"
        super().__init__(message)


class ConfigError(CertLogicUnitsError, ValueError):
    """The configuration document is malformed."""
