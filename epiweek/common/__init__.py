"""Common module - shared errors and missing-value helpers."""

from epiweek.common.errors import InvalidInput
from epiweek.common.missing import is_missing

__all__ = [
    'InvalidInput',
    'is_missing'
]
