from pathlib import Path

from medscan.extraction.base import BaseTextExtractor
from medscan.extraction.command import CommandRunner


class PdfToTextAdapter(BaseTextExtractor):
    """Extracts text from PDF with the poppler `pdftotext` tool."""

    def __init__(self, runner: CommandRunner, executable: str = "pdftotext") -> None:
        self._runner = runner
        self._executable = executable

    def extract(self, input_path: Path, output_path: Path) -> Path:
        self._runner.run(
            [self._executable, str(input_path), str(output_path)],
            error_message="Failed to extract text from PDF",
        )
        return output_path
