import typer

from medscan.processor.exceptions import ScanToolError

PRIVACY_POLICY = """\
----------------------------------------------
           PRIVACY & SECURITY POLICY
----------------------------------------------
- All data is encrypted and confidential.
- No storage of sensitive personal data.
- Unauthorized access is strictly prohibited.
----------------------------------------------"""


class Console:
    """User-facing progress lines with fixed markers.

    Progress goes to stdout; fatal diagnostics go to stderr.
    """

    @classmethod
    def privacy_policy(cls) -> None:
        typer.echo(PRIVACY_POLICY)

    @classmethod
    def info(cls, message: str) -> None:
        typer.echo(f"[INFO] {message}")

    @classmethod
    def found(cls, message: str) -> None:
        typer.echo(f"[FOUND] {message}")

    @classmethod
    def success(cls, message: str) -> None:
        typer.echo(f"[SUCCESS] {message}")

    @classmethod
    def fatal(cls, error: ScanToolError) -> None:
        typer.echo(f"[FATAL] {error} (Code: {error.code})", err=True)
