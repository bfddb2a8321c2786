# certlogic_units/core/time_unit.py

import logging
from enum import Enum

from certlogic_units.core.exceptions import InvalidTimeUnit


class TimeUnit(str, Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"

    @classmethod
    def list(cls):
        return [tu.value for tu in cls]

    @property
    def canonical_name(self) -> str:
        return self.value

    @classmethod
    def is_time_unit_name(cls, name) -> bool:
        return is_time_unit_name(name)

    @classmethod
    def parse(cls, name) -> "TimeUnit":
        return parse(name)


# Built once at import, never mutated
_UNITS_BY_NAME = {tu.value: tu for tu in TimeUnit}


def is_time_unit_name(name) -> bool:
    """
    Check whether ``name`` is exactly one of the canonical unit names.

    Matching is case-sensitive and nothing is trimmed, so ``"Day"`` and
    ``" day"`` are rejected. Any non-string input, including None, gives False.
    """
    if isinstance(name, TimeUnit):
        return True
    return isinstance(name, str) and name in _UNITS_BY_NAME


def parse(name) -> TimeUnit:
    """
    Return the TimeUnit whose canonical name is ``name``.

    :param name: candidate unit token, e.g. taken from a rule operand.
    :return: the matching TimeUnit member.
    :raises InvalidTimeUnit: if ``name`` is not a canonical unit name.
    """
    if isinstance(name, TimeUnit):
        return name
    if not is_time_unit_name(name):
        logging.debug("Rejected time unit token: %r", name)
        raise InvalidTimeUnit(name, TimeUnit.list())
    return _UNITS_BY_NAME[name]
