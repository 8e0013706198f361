"""Error types raised by epiweek."""

from typing import Any, Optional


class InvalidInput(ValueError):
    """
    Raised when an argument cannot be used for a conversion.

    Covers out-of-range weeks and weekdays, unknown conventions,
    unparseable dates and batch arguments whose lengths cannot be aligned.

    Attributes:
        argument: Name of the offending argument
        value: The offending value
        position: Batch position of the value, None for scalars
    """

    def __init__(
        self,
        argument: str,
        value: Any,
        reason: str,
        position: Optional[int] = None
    ):
        self.argument = argument
        self.value = value
        self.position = position
        self.reason = reason
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid {argument}{where}: {value!r} ({reason})")
