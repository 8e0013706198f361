"""
Batch alignment for element-wise conversions.

Arguments are scalars or sequences. Scalars repeat to any length. How
sequences of different lengths are aligned is a policy:

- "recycle": repeat each sequence cyclically up to the longest one. Every
  length must divide the longest, so no sequence is cut off part-way.
- "strict": all sequences must have the same length.
"""
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np
import pandas as pd

from epiweek.common.errors import InvalidInput

BROADCAST_POLICIES = ("recycle", "strict")


def is_sequence(value: Any) -> bool:
    """True for list-like batch arguments (strings are scalars)."""
    if isinstance(value, (str, bytes)):
        return False
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return pd.api.types.is_list_like(value)


def check_policy(policy: str) -> str:
    if policy not in BROADCAST_POLICIES:
        raise InvalidInput("broadcast", policy, f"expected one of {list(BROADCAST_POLICIES)}")
    return policy


def broadcast_args(
    args: Dict[str, Any],
    policy: str = "recycle"
) -> Tuple[int, Dict[str, List[Any]], bool]:
    """
    Align named arguments to a common length.

    Args:
        args: Mapping of argument name to scalar or sequence
        policy: "recycle" or "strict"

    Returns:
        Tuple of (length, aligned lists by name, any_sequence)

    Raises:
        InvalidInput: If sequence lengths are incompatible under the policy
    """
    check_policy(policy)

    sequences: Dict[str, Sequence[Any]] = {
        name: list(value) for name, value in args.items() if is_sequence(value)
    }
    if not sequences:
        return 1, {name: [value] for name, value in args.items()}, False

    lengths = {name: len(seq) for name, seq in sequences.items()}
    longest = max(lengths.values())

    if min(lengths.values()) == 0:
        non_empty = {name: n for name, n in lengths.items() if n > 0}
        if non_empty:
            name, n = next(iter(non_empty.items()))
            raise InvalidInput(
                name, f"<sequence of length {n}>",
                "cannot be aligned with an empty sequence argument"
            )
        return 0, {name: [] for name in args}, True

    for name, n in lengths.items():
        if policy == "strict" and n != longest:
            raise InvalidInput(
                name, f"<sequence of length {n}>",
                f"strict broadcasting requires length {longest}"
            )
        if policy == "recycle" and longest % n != 0:
            raise InvalidInput(
                name, f"<sequence of length {n}>",
                f"length does not divide the longest argument length {longest}"
            )

    aligned = {}
    for name, value in args.items():
        if name in sequences:
            seq = sequences[name]
            aligned[name] = [seq[i % len(seq)] for i in range(longest)]
        else:
            aligned[name] = [value] * longest
    return longest, aligned, True
