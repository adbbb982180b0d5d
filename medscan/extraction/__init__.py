from medscan.extraction.base import BaseTextExtractor
from medscan.extraction.exceptions import ExtractionError
from medscan.extraction.extractor import Extractor
from medscan.extraction.factory import ExtractorFactory, PdfExtractorFactory

__all__ = [
    "BaseTextExtractor",
    "ExtractionError",
    "Extractor",
    "ExtractorFactory",
    "PdfExtractorFactory",
]
