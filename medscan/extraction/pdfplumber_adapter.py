from pathlib import Path

import pdfplumber

from medscan.extraction.base import BaseTextExtractor
from medscan.extraction.exceptions import ExtractionError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, input_path: Path, output_path: Path) -> Path:
        try:
            with pdfplumber.open(str(input_path)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            output_path.write_text("\n".join(pages).strip(), encoding="utf-8")
            return output_path
        except Exception as exc:
            raise ExtractionError(
                f"Failed to extract text from PDF: pdfplumber: {exc}"
            ) from exc
