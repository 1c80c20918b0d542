from __future__ import annotations

import re
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import Tag

from .base import SwatchDocument, SwatchElement

WHITESPACE_RE = re.compile(r"\s+")
IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", flags=re.IGNORECASE)


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


def inline_background_color(style: str | None) -> str:
    """Return the ``background-color`` declared in an inline style attribute.

    Later declarations override earlier ones, as in the browser. The value is
    returned as written; no color normalization happens here.
    """
    if not style:
        return ""
    value = ""
    for declaration in style.split(";"):
        prop, sep, raw_value = declaration.partition(":")
        if not sep or prop.strip().lower() != "background-color":
            continue
        value = IMPORTANT_RE.sub("", raw_value).strip()
    return value


def element_text(element: Tag) -> str:
    return collapse_whitespace(element.get_text())


class StaticHtmlDocument(SwatchDocument):
    name = "html_static"

    def __init__(self, html: str) -> None:
        self.soup = BeautifulSoup(html, "lxml")

    @classmethod
    def from_path(cls, path: str | Path) -> StaticHtmlDocument:
        return cls(Path(path).read_text(encoding="utf-8"))

    def select(self, selector: str) -> list[SwatchElement]:
        elements = []
        for tag in self.soup.select(selector):
            style = tag.get("style")
            if isinstance(style, list):
                style = " ".join(style)
            elements.append(
                SwatchElement(
                    text=element_text(tag),
                    background_color=inline_background_color(style),
                )
            )
        return elements
