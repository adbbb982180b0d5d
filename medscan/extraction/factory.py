from collections.abc import Callable
from typing import ClassVar

from medscan.config.settings import Settings
from medscan.extraction.base import BaseTextExtractor
from medscan.extraction.command import CommandRunner
from medscan.extraction.pandoc_adapter import PandocDocxAdapter
from medscan.extraction.pdfplumber_adapter import PdfPlumberAdapter
from medscan.extraction.pdftotext_adapter import PdfToTextAdapter
from medscan.extraction.plain_text_adapter import PlainTextAdapter
from medscan.extraction.pymupdf_adapter import PyMuPdfAdapter
from medscan.extraction.xlsx2csv_adapter import Xlsx2CsvAdapter


class PdfExtractorFactory:
    """Creates the PDF extractor for the configured engine."""

    ENGINES: ClassVar[dict[str, Callable[[Settings, CommandRunner], BaseTextExtractor]]] = {
        "pdftotext": lambda settings, runner: PdfToTextAdapter(
            runner, settings.pdftotext_bin
        ),
        "pdfplumber": lambda settings, runner: PdfPlumberAdapter(),
        "pymupdf": lambda settings, runner: PyMuPdfAdapter(),
    }

    @classmethod
    def create(cls, settings: Settings, runner: CommandRunner) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        builder = cls.ENGINES.get(engine)
        if builder is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return builder(settings, runner)


class ExtractorFactory:
    """Builds the format tag -> extractor registry from settings."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        runner: CommandRunner | None = None,
    ) -> dict[str, BaseTextExtractor]:
        if runner is None:
            runner = CommandRunner(timeout_seconds=settings.converter_timeout_seconds)
        return {
            "pdf": PdfExtractorFactory.create(settings, runner),
            "docx": PandocDocxAdapter(runner, settings.pandoc_bin),
            "xlsx": Xlsx2CsvAdapter(runner, settings.xlsx2csv_bin),
            "txt": PlainTextAdapter(),
        }
