from collections.abc import Mapping
from pathlib import Path

from medscan.extraction.base import BaseTextExtractor
from medscan.logging.logger import Log
from medscan.processor.exceptions import UnsupportedFormatError
from medscan.processor.models import ExtractedText, InputFile


def extracted_text_path(workspace: Path, input_path: Path) -> Path:
    """Build path to extracted text: {workspace}/{input basename}.txt"""
    return workspace / f"{input_path.name}.txt"


class Extractor:
    """Dispatches an input file to the extractor registered for its format."""

    def __init__(self, extractors: Mapping[str, BaseTextExtractor]) -> None:
        self._extractors = dict(extractors)

    def extract(self, input_file: InputFile, workspace: Path) -> ExtractedText:
        """Extract *input_file* into *workspace*.

        Raises:
            UnsupportedFormatError: if no extractor is registered for the format.
            ExtractionError: if the extractor fails.
        """
        extractor = self._extractors.get(input_file.format)
        if extractor is None:
            raise UnsupportedFormatError(f"Unsupported format: {input_file.format}")
        output_path = extracted_text_path(workspace, input_file.path)
        extractor.extract(input_file.path, output_path)
        Log.info(
            f"Extracted {input_file.path} to {output_path} "
            f"({output_path.stat().st_size} bytes)"
        )
        return ExtractedText(source=input_file, path=output_path)
