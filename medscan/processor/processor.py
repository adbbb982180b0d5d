from collections.abc import Sequence
from pathlib import Path

from medscan.config.settings import Settings
from medscan.extraction.base import BaseTextExtractor
from medscan.extraction.extractor import Extractor
from medscan.extraction.factory import ExtractorFactory
from medscan.logging.logger import Log
from medscan.processor.format_resolver import FormatResolver
from medscan.processor.models import ScanResult, SensitiveTermList, SupportedFormats
from medscan.processor.pipeline import PipelineContext, PipelineStep
from medscan.processor.steps import ExtractTextStep, ResolveFormatStep, ScanStep
from medscan.scanning.scanner import SensitiveTermScanner


class Processor:
    """Runs the per-file pipeline: resolve format -> extract -> scan."""

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, input_path: Path, workspace: Path) -> ScanResult:
        """Run every step for *input_path*; any step error propagates."""
        context = PipelineContext(input_path=input_path, workspace=workspace)
        for step in self._steps:
            Log.debug(f"{type(step).__name__} on {input_path}")
            context = step.run(context)
        if context.scan_result is None:
            raise ValueError("Pipeline finished without a scan result")
        return context.scan_result


def build_processor(
    settings: Settings,
    extractors: dict[str, BaseTextExtractor] | None = None,
    terms: SensitiveTermList | None = None,
) -> Processor:
    """Build a Processor with the configured resolver, extractors and scanner."""
    supported = SupportedFormats()
    resolver = FormatResolver(supported, ignore_case=settings.ignore_extension_case)
    if extractors is None:
        extractors = ExtractorFactory.create(settings)
    scanner = SensitiveTermScanner(terms or SensitiveTermList(), supported)
    return Processor(
        steps=[
            ResolveFormatStep(resolver),
            ExtractTextStep(Extractor(extractors)),
            ScanStep(scanner),
        ]
    )
