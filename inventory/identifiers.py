# inventory/identifiers.py
DISPLAY_ID_PREFIX = 'INV-'
DISPLAY_ID_MIN_DIGITS = 3


def format_display_id(sequence: int) -> str:
    """
    Render a sequence number as a display identifier.

    The number is zero-padded to at least three digits and is never truncated:
    1 -> INV-001, 25 -> INV-025, 1000 -> INV-1000.
    """
    if isinstance(sequence, bool) or not isinstance(sequence, int) or sequence < 1:
        raise ValueError(f"Sequence must be a positive integer, got {sequence!r}")
    return f"{DISPLAY_ID_PREFIX}{sequence:0{DISPLAY_ID_MIN_DIGITS}d}"
