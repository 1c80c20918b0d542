from __future__ import annotations

import logging

from .config import ExtractorConfig
from .documents import SwatchDocument, SwatchElement
from .formatters import format_gel_module, format_swatch_lines
from .models import ExtractionResult, MalformedColorError, Swatch, SwatchError
from .parsing import parse_rgb_color

logger = logging.getLogger(__name__)


class SwatchExtractor:
    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()

    def _build_swatch(self, index: int, element: SwatchElement) -> Swatch | SwatchError:
        parsed = parse_rgb_color(element.background_color)
        if not parsed.ok or parsed.channels is None:
            return SwatchError(
                index=index,
                name=element.text,
                raw=parsed.raw,
                error=parsed.error or "Unparseable background color.",
            )
        return Swatch(name=element.text, color=parsed.channels)

    def extract(self, document: SwatchDocument) -> ExtractionResult:
        """Read every element matching the configured selector, in document order.

        With ``on_malformed="fail"`` the first bad color raises
        ``MalformedColorError`` and nothing is returned. With ``"skip"`` the
        element is recorded in ``errors`` and extraction carries on.
        """
        elements = document.select(self.config.selector)
        logger.debug(
            "Selector %r matched %d element(s) in %s document",
            self.config.selector,
            len(elements),
            document.name,
        )

        result = ExtractionResult()
        for index, element in enumerate(elements):
            built = self._build_swatch(index, element)
            if isinstance(built, Swatch):
                result.swatches.append(built)
                continue

            if self.config.on_malformed == "fail":
                raise MalformedColorError(built)
            logger.warning("Skipping element %d (%r): %s", index, built.name, built.error)
            result.errors.append(built)

        return result

    def format(self, result: ExtractionResult) -> str:
        if self.config.const_name:
            return format_gel_module(
                result.swatches,
                self.config.const_name,
                escape_names=self.config.escape_names,
            )
        return format_swatch_lines(result.swatches, escape_names=self.config.escape_names)

    def render(self, document: SwatchDocument) -> str:
        return self.format(self.extract(document))
