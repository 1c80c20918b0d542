from .config import ExtractorConfig
from .documents import SnapshotDocument, StaticHtmlDocument, SwatchDocument, SwatchElement
from .extractor import SwatchExtractor
from .formatters import format_extraction_errors, format_gel_module, format_swatch_lines
from .models import ExtractionResult, MalformedColorError, Swatch
from .parsing import parse_rgb_color

__all__ = [
    "ExtractorConfig",
    "ExtractionResult",
    "MalformedColorError",
    "SnapshotDocument",
    "StaticHtmlDocument",
    "Swatch",
    "SwatchDocument",
    "SwatchElement",
    "SwatchExtractor",
    "format_extraction_errors",
    "format_gel_module",
    "format_swatch_lines",
    "parse_rgb_color",
]
