from __future__ import annotations

import pytest


def listing_html(*swatches: tuple[str, str]) -> str:
    anchors = "\n".join(
        f'<div class="colours-list__tooltip-wrapper">'
        f'<a href="#" style="background-color: {color}">{name}</a>'
        f"</div>"
        for name, color in swatches
    )
    return f"""<!DOCTYPE html>
<html>
  <head><title>Colour filters</title></head>
  <body>
    <nav><a href="/">Home</a></nav>
    <section class="colours-list">
{anchors}
    </section>
  </body>
</html>
"""


@pytest.fixture
def two_swatch_html() -> str:
    return listing_html(
        ("Red Filter", "rgb(255, 0, 0)"),
        ("Soft Blue", "rgb(0,128,255)"),
    )


@pytest.fixture
def malformed_middle_html() -> str:
    return listing_html(
        ("19 Fire", "rgb(255, 131, 39)"),
        ("Broken", "blue"),
        ("26 Bright Red", "rgb(255, 0, 18)"),
    )


@pytest.fixture
def make_listing():
    return listing_html
