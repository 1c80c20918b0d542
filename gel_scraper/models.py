from __future__ import annotations

from dataclasses import dataclass, field

Channels = tuple[float, float, float]


@dataclass(slots=True, frozen=True)
class Swatch:
    name: str
    color: Channels


@dataclass(slots=True)
class ColorParseResult:
    raw: str
    ok: bool
    channels: Channels | None = None
    error: str | None = None


@dataclass(slots=True)
class SwatchError:
    index: int
    name: str
    raw: str
    error: str


@dataclass(slots=True)
class ExtractionResult:
    swatches: list[Swatch] = field(default_factory=list)
    errors: list[SwatchError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class MalformedColorError(ValueError):
    """Raised when an element's background color is not an ``rgb(R, G, B)`` value."""

    def __init__(self, detail: SwatchError) -> None:
        self.detail = detail
        super().__init__(
            f"Element {detail.index} ({detail.name!r}): {detail.error}"
        )
