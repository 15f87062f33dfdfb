"""Human-readable formatting helpers."""

_BYTE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_bytes(size: float) -> str:
    """
    Format a byte count using base-1024 units.

    The value is rounded to two decimals and trailing zeros are dropped,
    so 1024 renders as ``"1 KB"`` and 1536 as ``"1.5 KB"``. Sizes above
    the largest unit stay expressed in GB.

    Raises:
        ValueError: If ``size`` is negative.
    """
    if size < 0:
        raise ValueError("Byte size cannot be negative")
    if size == 0:
        return "0 Bytes"

    value = float(size)
    index = 0
    while value >= 1024 and index < len(_BYTE_UNITS) - 1:
        value /= 1024
        index += 1

    text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    return f"{text} {_BYTE_UNITS[index]}"
