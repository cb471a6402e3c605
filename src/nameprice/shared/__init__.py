"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Fixed-point integer scaling (nameprice.shared.number)
- Validation
- Time constants
- Logging configuration (nameprice.shared.logging_conf)

Only the dependency-free modules are re-exported here; number and
logging_conf read settings and are imported from their own modules.
"""

from nameprice.shared.validators import validate_rate, validate_scale_factor
from nameprice.shared.time import (
    GRACE_PERIOD,
    ONE_DAY_IN_SECONDS,
    ONE_HOUR_IN_SECONDS,
    ONE_MINUTE_IN_SECONDS,
)

__all__ = [
    "validate_rate",
    "validate_scale_factor",
    "GRACE_PERIOD",
    "ONE_DAY_IN_SECONDS",
    "ONE_HOUR_IN_SECONDS",
    "ONE_MINUTE_IN_SECONDS",
]
