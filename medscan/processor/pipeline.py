from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from medscan.processor.models import ExtractedText, InputFile, ScanResult


@dataclass(slots=True)
class PipelineContext:
    input_path: Path
    workspace: Path
    input_file: InputFile | None = None
    extracted: ExtractedText | None = None
    scan_result: ScanResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
