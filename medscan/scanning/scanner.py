"""Sensitive-term scanning over extracted plain text.

The scan reads the whole extracted file, lower-cases it once, and tests each
term of the vocabulary in list order. The first term found is reported and
the scan stops, so a file holding several terms reports only the earliest
listed one, wherever it sits in the text.
"""

from pathlib import Path

from medscan.extraction.exceptions import ExtractionError
from medscan.logging.logger import Log
from medscan.processor.exceptions import UnsupportedFormatError
from medscan.processor.models import ScanResult, SensitiveTermList, SupportedFormats


class SensitiveTermScanner:
    """Case-insensitive, first-match substring scan over a fixed vocabulary."""

    def __init__(self, terms: SensitiveTermList, supported: SupportedFormats) -> None:
        self._terms = terms
        self._supported = supported

    def scan(self, path: Path, format_tag: str) -> ScanResult:
        """Return the first term (in list order) occurring in the file at *path*.

        Raises:
            UnsupportedFormatError: if *format_tag* is not a supported tag.
            ExtractionError: if the extracted file cannot be read.
        """
        if format_tag not in self._supported:
            raise UnsupportedFormatError(f"Unsupported format for scanning: {format_tag}")

        haystack = self._read(path).lower()
        for term in self._terms:
            if term.lower() in haystack:
                Log.debug(f"Term '{term}' matched in {path}")
                return ScanResult(path=path, matched_term=term)
        return ScanResult(path=path)

    def _read(self, path: Path) -> str:
        try:
            return path.read_bytes().decode("utf-8", errors="replace")
        except OSError as exc:
            raise ExtractionError(f"Failed to read extracted text {path}: {exc}") from exc
