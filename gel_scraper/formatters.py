from __future__ import annotations

import re
from collections.abc import Iterable

from .models import ExtractionResult, Swatch

CONST_NAME_RE = re.compile(r"[A-Z][A-Z0-9_]*")

GEL_MODULE_HEADER = "use crate::color_gel;\n\nuse super::ColorGel;\n"


def format_channel(value: float) -> str:
    return f"{value:.4f}"


def _escape_name(name: str) -> str:
    return name.replace("\\", "\\\\").replace('"', '\\"')


def format_swatch_line(swatch: Swatch, escape_names: bool = False) -> str:
    """Render one swatch as a ``color_gel!`` macro invocation.

    Grammar: ``color_gel!("<name>", [<r>, <g>, <b>]),`` where each channel has
    exactly four decimal digits. The name is inserted verbatim unless
    ``escape_names`` is set, in which case backslashes and double quotes are
    escaped.
    """
    name = _escape_name(swatch.name) if escape_names else swatch.name
    channels = ", ".join(format_channel(value) for value in swatch.color)
    return f'color_gel!("{name}", [{channels}]),'


def format_swatch_lines(swatches: Iterable[Swatch], escape_names: bool = False) -> str:
    return "\n".join(format_swatch_line(s, escape_names=escape_names) for s in swatches)


def format_gel_module(
    swatches: Iterable[Swatch],
    const_name: str,
    escape_names: bool = False,
) -> str:
    if not CONST_NAME_RE.fullmatch(const_name):
        raise ValueError(
            f"Constant name must be an upper-case identifier, got {const_name!r}"
        )

    lines = [GEL_MODULE_HEADER, f"pub const {const_name}: &[ColorGel] = &["]
    for swatch in swatches:
        lines.append("    " + format_swatch_line(swatch, escape_names=escape_names))
    lines.append("];")
    return "\n".join(lines)


def format_extraction_errors(result: ExtractionResult, max_items: int = 5) -> str:
    if not result.errors:
        return ""
    lines = [f"Skipped {len(result.errors)} element(s) with malformed colors:"]
    for item in result.errors[:max_items]:
        lines.append(f"- #{item.index} {item.name!r}: {item.error}")
    remaining = len(result.errors) - max_items
    if remaining > 0:
        lines.append(f"- ... and {remaining} more")
    return "\n".join(lines)
