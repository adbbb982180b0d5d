from pathlib import Path

import pymupdf

from medscan.extraction.base import BaseTextExtractor
from medscan.extraction.exceptions import ExtractionError


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, input_path: Path, output_path: Path) -> Path:
        try:
            with pymupdf.open(str(input_path), filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            output_path.write_text("\n".join(pages).strip(), encoding="utf-8")
            return output_path
        except Exception as exc:
            raise ExtractionError(
                f"Failed to extract text from PDF: pymupdf: {exc}"
            ) from exc
