from __future__ import annotations

import logging
import re

from plotly.colors import hex_to_rgb, label_rgb

logger = logging.getLogger(__name__)

FALLBACK_COLOR = "rgb(0, 0, 0)"

_HEX_RE = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def color_from_string(hex_string: str) -> str:
    """
    Resolve a hex RGB string ('#355E3B', '355E3B' or short '#fff') to a
    plotly 'rgb(r, g, b)' color. Unparseable input falls back to black.
    """
    try:
        if not isinstance(hex_string, str) or not _HEX_RE.match(hex_string.strip()):
            raise ValueError(f"not a hex color: {hex_string!r}")
        digits = hex_string.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return label_rgb(hex_to_rgb("#" + digits))
    except ValueError as e:
        logger.warning("Falling back to %s: %s", FALLBACK_COLOR, e)
        return FALLBACK_COLOR
