from pathlib import Path

from medscan.extraction.base import BaseTextExtractor
from medscan.extraction.command import CommandRunner
from medscan.extraction.exceptions import ExtractionError


def flatten_rows(csv_bytes: bytes) -> bytes:
    """Join all CSV rows into a single line, one space per newline."""
    return csv_bytes.replace(b"\n", b" ")


class Xlsx2CsvAdapter(BaseTextExtractor):
    """Converts XLSX to CSV with xlsx2csv and flattens it to one line."""

    def __init__(self, runner: CommandRunner, executable: str = "xlsx2csv") -> None:
        self._runner = runner
        self._executable = executable

    def extract(self, input_path: Path, output_path: Path) -> Path:
        error_message = "Failed to extract text from XLSX"
        csv_bytes = self._runner.run(
            [self._executable, str(input_path)],
            error_message=error_message,
        )
        try:
            output_path.write_bytes(flatten_rows(csv_bytes))
        except OSError as exc:
            raise ExtractionError(f"{error_message}: {exc}") from exc
        return output_path
