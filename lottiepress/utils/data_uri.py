import re
from typing import Optional, Tuple


# ============================================================================
# Data URI Helpers
# ============================================================================

SUPPORTED_FORMATS = ("png", "jpeg", "gif", "tiff", "webp")

_DATA_URI_PATTERN = re.compile(r"^data:image/(png|jpeg|gif|tiff|webp);base64,", re.IGNORECASE)


def get_image_format(payload: str) -> Optional[str]:
    """
    Extract the image format from an embedded image payload.

    Args:
        payload: Asset payload string

    Returns:
        Lower-case format name, or None if the payload is not a base64 data URI
        with a supported image format
    """
    match = _DATA_URI_PATTERN.match(payload)
    if match is None:
        return None
    return match.group(1).lower()


def split_data_uri(payload: str) -> Tuple[str, str]:
    """
    Split a data URI into its header and base64 data.

    Returns:
        Tuple of (header up to and including the comma, base64 data)
    """
    header, _, data = payload.partition(",")
    return header + ",", data


def build_data_uri(image_format: str, data: str) -> str:
    """Build a ``data:image/<format>;base64,<data>`` payload."""
    return f"data:image/{image_format};base64,{data}"
