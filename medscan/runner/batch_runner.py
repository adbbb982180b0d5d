from collections.abc import Sequence
from pathlib import Path

from medscan.config.settings import Settings
from medscan.logging.console import Console
from medscan.logging.logger import Log
from medscan.processor.exceptions import UsageError
from medscan.processor.models import ScanResult
from medscan.processor.processor import Processor
from medscan.runner.workspace import workspace


class BatchRunner:
    """Processes input files one at a time; the first error aborts the batch."""

    def __init__(self, processor: Processor, settings: Settings) -> None:
        self._processor = processor
        self._settings = settings

    def run(self, input_paths: Sequence[Path]) -> list[ScanResult]:
        """Scan every file in order and return the results.

        Raises:
            UsageError: if *input_paths* is empty.
            ScanToolError: the first error of any file, after the workspace
                has been removed.
        """
        if not input_paths:
            raise UsageError("Usage: medscan <file1> <file2> ...")

        Console.privacy_policy()
        results: list[ScanResult] = []
        with workspace(self._settings.workspace_dir) as workdir:
            for input_path in input_paths:
                Console.info(f"Processing file: {input_path}")
                results.append(self._processor.process(input_path, workdir))
            Console.success("All files processed successfully.")
        Log.info(
            f"Scanned {len(results)} files, "
            f"{sum(r.is_match for r in results)} with sensitive terms"
        )
        return results
