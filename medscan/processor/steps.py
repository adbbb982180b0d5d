from medscan.extraction.extractor import Extractor
from medscan.logging.console import Console
from medscan.processor.format_resolver import FormatResolver
from medscan.processor.models import InputFile
from medscan.processor.pipeline import PipelineContext, PipelineStep
from medscan.scanning.scanner import SensitiveTermScanner


class ResolveFormatStep(PipelineStep):
    def __init__(self, resolver: FormatResolver) -> None:
        self._resolver = resolver

    def run(self, context: PipelineContext) -> PipelineContext:
        format_tag = self._resolver.resolve(context.input_path)
        context.input_file = InputFile(path=context.input_path, format=format_tag)
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: Extractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.input_file is None:
            raise ValueError("PipelineContext.input_file must be set before extraction")
        context.extracted = self._extractor.extract(context.input_file, context.workspace)
        return context


class ScanStep(PipelineStep):
    def __init__(self, scanner: SensitiveTermScanner) -> None:
        self._scanner = scanner

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None:
            raise ValueError("PipelineContext.extracted must be set before scanning")
        path = context.extracted.path
        Console.info(f"Scanning {path} for sensitive data...")
        result = self._scanner.scan(path, context.extracted.source.format)
        if result.is_match:
            Console.found(f"Sensitive term '{result.matched_term}' found in {path}")
        else:
            Console.info(f"No sensitive data found in {path}")
        context.scan_result = result
        return context
