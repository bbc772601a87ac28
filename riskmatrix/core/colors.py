"""Color helpers for risk matrix rendering.

Colors are exchanged as lower-case ``#rrggbb`` strings everywhere in the
package. Interpolation rounds half-up so that the midpoint between black and
white is ``#808080`` regardless of the interpreter's banker's rounding.
"""
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Tuple


HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")

# Gray used when a score has no level
NEUTRAL_COLOR = "#6b7280"

# Severity ramp shared by every default level count
SEVERITY_COLOR_RAMP = [
    "#22c55e",  # Green
    "#84cc16",  # Light green
    "#eab308",  # Yellow
    "#f97316",  # Orange
    "#ef4444",  # Red
    "#dc2626",  # Dark red
    "#b91c1c",  # Darker red
    "#991b1b",  # Very dark red
    "#7f1d1d",  # Darkest red
    "#450a0a",  # Maroon
]

# Quick picks offered by the configuration editor
RISK_COLOR_PRESETS = {
    "low": ("Low", "#22c55e"),
    "medium": ("Medium", "#eab308"),
    "high": ("High", "#f97316"),
    "extreme": ("Extreme", "#ef4444"),
    "critical": ("Critical", "#dc2626"),
}


def is_hex_color(value: str) -> bool:
    return bool(value) and HEX_COLOR_PATTERN.match(value) is not None


def parse_hex_color(color: str) -> Tuple[int, int, int]:
    """
    Split a ``#rrggbb`` string into its RGB channels.

    Raises:
        ValueError: If the string is not a six-digit hex color.

    Examples:
        >>> parse_hex_color("#ff8000")
        (255, 128, 0)
    """
    if not is_hex_color(color):
        raise ValueError(f"Invalid hex color: {color!r}")
    return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)


def to_hex_color(r: int, g: int, b: int) -> str:
    """Encode RGB channels, clamped to 0-255, as ``#rrggbb``."""
    channels = [max(0, min(255, int(c))) for c in (r, g, b)]
    return "#" + "".join(f"{c:02x}" for c in channels)


def round_half_up(value: float) -> int:
    """
    Round a float using conventional half-up rounding.

    Examples:
        >>> round_half_up(127.5)
        128
        >>> round_half_up(127.49)
        127
    """
    return int(Decimal(str(value)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def interpolate_color(color_a: str, color_b: str, t: float) -> str:
    """
    Linearly interpolate between two colors, channel by channel.

    Args:
        color_a: Start color (returned at t=0)
        color_b: End color (returned at t=1)
        t: Position between the two colors, expected in [0, 1]

    Returns:
        Interpolated ``#rrggbb`` color

    Examples:
        >>> interpolate_color("#000000", "#ffffff", 0.5)
        '#808080'
    """
    r1, g1, b1 = parse_hex_color(color_a)
    r2, g2, b2 = parse_hex_color(color_b)

    r = round_half_up(r1 + (r2 - r1) * t)
    g = round_half_up(g1 + (g2 - g1) * t)
    b = round_half_up(b1 + (b2 - b1) * t)

    return to_hex_color(r, g, b)


def get_text_color(background: str) -> str:
    """Black or white text, whichever reads better on ``background``."""
    r, g, b = parse_hex_color(background)
    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return "#000000" if luminance > 0.5 else "#ffffff"
