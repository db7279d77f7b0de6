# ============================================================================
# Utility Functions
# ============================================================================


def format_size(size_bytes: float) -> str:
    """Format bytes to human-readable size."""
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size_bytes < 1024.0:
            return f"{size_bytes:.2f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.2f} PB"


def format_kilobytes(length: int) -> str:
    """Format a payload length as kilobytes with one decimal, e.g. ``"12.5KB"``."""
    return f"{length / 1024:.1f}KB"


def reduction_percent(original: int, new: int) -> float:
    """
    Percentage by which ``new`` is smaller than ``original``.

    Negative when ``new`` is larger. Returns 0.0 for an empty original.
    """
    if original <= 0:
        return 0.0
    return (original - new) / original * 100
