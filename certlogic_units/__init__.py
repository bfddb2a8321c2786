from certlogic_units.core.config_loader import ConfigManager, ValidityWindow, configure_logging
from certlogic_units.core.exceptions import CertLogicUnitsError, ConfigError, InvalidTimeUnit
from certlogic_units.core.operand_check import ValidationError, validate_time_unit_operand
from certlogic_units.core.time_unit import TimeUnit, is_time_unit_name, parse

__all__ = [
    'CertLogicUnitsError',
    'ConfigError',
    'ConfigManager',
    'InvalidTimeUnit',
    'TimeUnit',
    'ValidationError',
    'ValidityWindow',
    'configure_logging',
    'is_time_unit_name',
    'parse',
    'validate_time_unit_operand',
]
