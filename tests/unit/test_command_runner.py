import subprocess
from unittest.mock import patch

import pytest

from medscan.extraction.command import CommandRunner
from medscan.extraction.exceptions import ExtractionError


def _completed(returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> subprocess.CompletedProcess[bytes]:
    return subprocess.CompletedProcess(["tool"], returncode, stdout=stdout, stderr=stderr)


class TestCommandRunnerSuccess:
    def test_returns_stdout(self) -> None:
        with patch(
            "medscan.extraction.command.subprocess.run",
            return_value=_completed(0, stdout=b"a,b\n"),
        ) as mock_run:
            out = CommandRunner(timeout_seconds=7).run(["tool", "in"], "boom")

        assert out == b"a,b\n"
        mock_run.assert_called_once_with(
            ["tool", "in"], capture_output=True, timeout=7, check=False
        )


class TestCommandRunnerFailures:
    def test_non_zero_exit_raises(self) -> None:
        with patch(
            "medscan.extraction.command.subprocess.run",
            return_value=_completed(1, stderr=b"bad input"),
        ):
            with pytest.raises(ExtractionError, match="^Failed to extract text from PDF$"):
                CommandRunner().run(["pdftotext", "a.pdf", "a.txt"], "Failed to extract text from PDF")

    def test_missing_program_raises(self) -> None:
        with patch(
            "medscan.extraction.command.subprocess.run",
            side_effect=FileNotFoundError("pandoc"),
        ):
            with pytest.raises(ExtractionError, match="'pandoc' is not installed"):
                CommandRunner().run(["pandoc", "a.docx"], "Failed to extract text from DOCX")

    def test_timeout_raises(self) -> None:
        with patch(
            "medscan.extraction.command.subprocess.run",
            side_effect=subprocess.TimeoutExpired(["xlsx2csv"], 3),
        ):
            with pytest.raises(ExtractionError, match="timed out after 3s"):
                CommandRunner(timeout_seconds=3).run(["xlsx2csv", "a.xlsx"], "Failed")

    def test_os_error_raises(self) -> None:
        with patch(
            "medscan.extraction.command.subprocess.run",
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(ExtractionError, match="denied"):
                CommandRunner().run(["tool"], "Failed")
