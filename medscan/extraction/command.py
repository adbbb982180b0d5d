import subprocess
from collections.abc import Sequence

from medscan.extraction.exceptions import ExtractionError
from medscan.logging.logger import Log


class CommandRunner:
    """Runs an external converter and maps any failure to ExtractionError."""

    def __init__(self, timeout_seconds: int = 120) -> None:
        self._timeout_seconds = timeout_seconds

    def run(self, args: Sequence[str], error_message: str) -> bytes:
        """Run *args* to completion and return its standard output.

        Raises:
            ExtractionError: if the program is missing, times out or exits
                non-zero. The message is *error_message* plus the cause.
        """
        Log.debug(f"Running converter: {' '.join(args)}")
        try:
            completed = subprocess.run(
                list(args),
                capture_output=True,
                timeout=self._timeout_seconds,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ExtractionError(
                f"{error_message}: '{args[0]}' is not installed"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise ExtractionError(
                f"{error_message}: '{args[0]}' timed out after {self._timeout_seconds}s"
            ) from exc
        except OSError as exc:
            raise ExtractionError(f"{error_message}: {exc}") from exc

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            Log.error(f"'{args[0]}' exited with {completed.returncode}: {stderr}")
            raise ExtractionError(error_message)
        return completed.stdout
