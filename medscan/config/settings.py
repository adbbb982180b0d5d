from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from MEDSCAN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MEDSCAN_", env_file=".env", extra="ignore"
    )

    log_level: str = "WARNING"

    workspace_dir: Path | None = None

    pdf_engine: str = "pdftotext"
    pdftotext_bin: str = "pdftotext"
    pandoc_bin: str = "pandoc"
    xlsx2csv_bin: str = "xlsx2csv"
    converter_timeout_seconds: int = 120

    # Extensions are matched exactly unless this is enabled (".PDF" is rejected).
    ignore_extension_case: bool = False
