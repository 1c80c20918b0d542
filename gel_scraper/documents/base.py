from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SwatchElement:
    text: str
    background_color: str = ""


class SwatchDocument(ABC):
    name: str = "base"

    @abstractmethod
    def select(self, selector: str) -> list[SwatchElement]:
        raise NotImplementedError


class SnapshotDocument(SwatchDocument):
    """Elements already collected for each selector, e.g. from a browser render."""

    name = "snapshot"

    def __init__(self, elements: Mapping[str, Iterable[SwatchElement]]) -> None:
        self._elements = {selector: list(items) for selector, items in elements.items()}

    def select(self, selector: str) -> list[SwatchElement]:
        return list(self._elements.get(selector, []))
