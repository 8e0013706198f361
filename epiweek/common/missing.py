"""Missing-value detection shared by the converters."""

from typing import Any

import pandas as pd


def is_missing(value: Any) -> bool:
    """
    Check whether a scalar is an absent marker.

    None, NaN, pd.NA, pd.NaT and numpy NaT all count as missing.
    List-likes are never treated as missing.
    """
    if value is None:
        return True
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))
