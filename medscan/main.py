import signal
from pathlib import Path
from types import FrameType

import typer

from medscan.config.settings import Settings
from medscan.logging.console import Console
from medscan.logging.logger import Log
from medscan.processor.exceptions import ConfigurationError, ScanToolError
from medscan.processor.processor import Processor, build_processor
from medscan.runner.batch_runner import BatchRunner

app = typer.Typer(add_completion=False)


def _exit_on_sigterm(signum: int, frame: FrameType | None) -> None:
    raise SystemExit(128 + signum)


def _configure(overrides: dict[str, object]) -> tuple[Settings, Processor]:
    """Load settings with CLI overrides and build the processor.

    Raises:
        ConfigurationError: on an invalid setting, log level or PDF engine.
    """
    try:
        settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
        Log.configure(settings.log_level)
        return settings, build_processor(settings)
    except ValueError as exc:
        # pydantic's ValidationError is a ValueError too
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


@app.command()
def main(
    files: list[Path] | None = typer.Argument(None, help="Documents to scan"),
    ignore_extension_case: bool | None = typer.Option(
        None,
        "--ignore-extension-case/--exact-extension-case",
        help="Accept upper-case extensions such as .PDF",
    ),
    pdf_engine: str | None = typer.Option(None, help="pdftotext, pdfplumber or pymupdf"),
    log_level: str | None = typer.Option(None, help="Diagnostic log level"),
    workspace_dir: Path | None = typer.Option(
        None, help="Parent directory for the per-run workspace"
    ),
) -> None:
    """Extract text from documents and report sensitive medical terms."""
    overrides = {
        "ignore_extension_case": ignore_extension_case,
        "pdf_engine": pdf_engine,
        "log_level": log_level,
        "workspace_dir": workspace_dir,
    }
    signal.signal(signal.SIGTERM, _exit_on_sigterm)

    try:
        settings, processor = _configure(overrides)
        BatchRunner(processor, settings).run(files or [])
    except ScanToolError as exc:
        Console.fatal(exc)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
