from typing import Dict

STATUS_COLORS: Dict[str, str] = {
    "Unverified": "#171717",
    "Incomplete": "crimson",
    "Submitted": "darkblue",
    "Admitted": "seagreen",
    "Refused": "orangered",
    "Waitlisted": "dimgray",
    "Not confirmed": "#590059",
    "Confirmed": "darkgreen",
    "Declined": "red",
    "Checked-In": "darkslategrey",
}

DEFAULT_STATUS_COLOR = "#6b7280"

DARK_NAMED_COLORS = (
    "darkblue",
    "darkgreen",
    "darkslategrey",
    "dimgray",
    "seagreen",
    "crimson",
    "orangered",
    "red",
)


def get_status_color(status: str) -> str:
    """Badge colour for an application status, grey when unknown."""
    return STATUS_COLORS.get(status, DEFAULT_STATUS_COLOR)


def is_dark_color(color: str) -> bool:
    # Hex colours by relative luminance, named colours by a known list
    if color.startswith("#"):
        hex_value = color[1:]
        r, g, b = (int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
        return (0.299 * r + 0.587 * g + 0.114 * b) / 255 < 0.5
    return any(name in color.lower() for name in DARK_NAMED_COLORS)
