from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

MalformedPolicy = Literal["fail", "skip"]

DEFAULT_SELECTOR = ".colours-list__tooltip-wrapper > a"


@dataclass(slots=True)
class ExtractorConfig:
    selector: str = DEFAULT_SELECTOR
    on_malformed: MalformedPolicy = "fail"
    escape_names: bool = False
    const_name: str | None = None
    browser_timeout_s: float = 20.0

    def __post_init__(self) -> None:
        if self.on_malformed not in ("fail", "skip"):
            raise ValueError(
                f"on_malformed must be 'fail' or 'skip', got {self.on_malformed!r}"
            )
