from pathlib import Path

from medscan.extraction.base import BaseTextExtractor
from medscan.extraction.command import CommandRunner


class PandocDocxAdapter(BaseTextExtractor):
    """Converts DOCX to plain text with pandoc."""

    def __init__(self, runner: CommandRunner, executable: str = "pandoc") -> None:
        self._runner = runner
        self._executable = executable

    def extract(self, input_path: Path, output_path: Path) -> Path:
        self._runner.run(
            [
                self._executable,
                "-f",
                "docx",
                "-t",
                "plain",
                str(input_path),
                "-o",
                str(output_path),
            ],
            error_message="Failed to extract text from DOCX",
        )
        return output_path
