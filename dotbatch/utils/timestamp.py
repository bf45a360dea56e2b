"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a filesystem-safe string.

    Used for naming session log directories (e.g., "render_20251114_123456").

    Returns:
        Timestamp formatted as YYYYMMDD_HHMMSS
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def format_duration(seconds: float) -> str:
    """
    Format an elapsed time in compact form.

    Examples:
        format_duration(0.4)    # "0.40s"
        format_duration(75.2)   # "1m 15s"
        format_duration(3725)   # "1h 2m"
    """
    if seconds < 60:
        return f"{seconds:.2f}s"

    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs}s"

    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m"
