from abc import ABC, abstractmethod
from pathlib import Path


class BaseTextExtractor(ABC):
    """Contract for all text extraction adapters."""

    @abstractmethod
    def extract(self, input_path: Path, output_path: Path) -> Path:
        """Write a plain-text rendering of *input_path* to *output_path*.

        Args:
            input_path: Source document. Never modified.
            output_path: Destination file inside the run workspace.

        Returns:
            The path of the written text file.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """
