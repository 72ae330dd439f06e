from typing import Any, Optional


def to_int(value: Any, default: int = 0) -> int:
    """
    Lenient integer parsing for query strings.
    Absent values give the default; unparseable ones count as 0.
    """
    if value is None or value == "":
        return default

    try:
        return int(str(value).strip())
    except ValueError:
        pass

    try:
        return int(float(str(value).strip()))
    except (ValueError, OverflowError):
        return 0


def clamp(value: int, lower: int, upper: Optional[int] = None) -> int:
    value = max(lower, value)
    if upper is not None:
        value = min(upper, value)
    return value
