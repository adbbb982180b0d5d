import shutil
from pathlib import Path

from medscan.extraction.base import BaseTextExtractor
from medscan.extraction.exceptions import ExtractionError


class PlainTextAdapter(BaseTextExtractor):
    """Copies a text file into the workspace byte for byte."""

    def extract(self, input_path: Path, output_path: Path) -> Path:
        try:
            shutil.copyfile(input_path, output_path)
        except OSError as exc:
            raise ExtractionError(f"Failed to process TXT file: {exc}") from exc
        return output_path
