# certlogic_units/core/operand_check.py

import json
import logging
from dataclasses import dataclass
from typing import Any, List

from certlogic_units.core.time_unit import TimeUnit, is_time_unit_name

UNIT_OPERAND_INDEX = 2


@dataclass
class ValidationError:
    expr: Any
    message: str


def _as_json(value) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


def validate_time_unit_operand(expr, values) -> List[ValidationError]:
    """
    Check the "unit" operand (#3) of a plusTime operation.

    Only the unit operand is looked at; operand counts and the other operands
    are left to the expression validator.

    :param expr: the JSON-decoded operation, attached to any error.
    :param values: the JSON-decoded operand list of that operation.
    :return: a list with one ValidationError if the unit operand is present
        but does not name a time unit, otherwise an empty list.
    """
    if not isinstance(values, list) or len(values) <= UNIT_OPERAND_INDEX:
        return []
    unit = values[UNIT_OPERAND_INDEX]
    if is_time_unit_name(unit):
        return []
    logging.debug("plusTime unit operand rejected: %r", unit)
    return [
        ValidationError(
            expr,
            f"\"unit\" argument (#3) of \"plusTime\" must be a string equal to one of "
            f"{', '.join(TimeUnit.list())}, but it is: {_as_json(unit)}"
        )
    ]
