from __future__ import annotations

import re

from .models import ColorParseResult

RGB_COLOR_RE = re.compile(r"rgb\((\d+),\s*(\d+),\s*(\d+)\)", flags=re.ASCII)
CHANNEL_MAX = 255


def normalize_channel(raw: int) -> float:
    return raw / CHANNEL_MAX


def parse_rgb_color(value: str | None) -> ColorParseResult:
    """Parse an inline ``rgb(R, G, B)`` background color into 0..1 channels.

    The pattern is searched, not anchored, and only tolerates whitespace after
    the commas. Failures come back as ``ok=False`` results rather than
    exceptions so the caller decides whether to abort or skip.
    """
    raw = value or ""
    if not raw.strip():
        return ColorParseResult(raw=raw, ok=False, error="No background color set.")

    match = RGB_COLOR_RE.search(raw)
    if match is None:
        return ColorParseResult(
            raw=raw,
            ok=False,
            error=f"Background color {raw!r} is not of the form rgb(R, G, B).",
        )

    # Leading zeros aside, more than three digits is always above 255.
    groups = [group.lstrip("0") or "0" for group in match.groups()]
    if any(len(group) > 3 or int(group, 10) > CHANNEL_MAX for group in groups):
        return ColorParseResult(
            raw=raw,
            ok=False,
            error=f"Background color {raw!r} has a channel above {CHANNEL_MAX}.",
        )

    r, g, b = (normalize_channel(int(group, 10)) for group in groups)
    return ColorParseResult(raw=raw, ok=True, channels=(r, g, b))
