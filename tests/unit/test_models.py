import dataclasses
from pathlib import Path

import pytest

from medscan.processor.models import ScanResult, SensitiveTermList, SupportedFormats


class TestSensitiveTermList:
    def test_default_terms_in_order(self) -> None:
        assert list(SensitiveTermList()) == [
            "dossier médical",
            "confidentiel médical",
            "PHI",
            "health information",
        ]

    def test_is_immutable(self) -> None:
        terms = SensitiveTermList()
        with pytest.raises(dataclasses.FrozenInstanceError):
            terms.terms = ("other",)  # type: ignore[misc]

    def test_len(self) -> None:
        assert len(SensitiveTermList()) == 4


class TestSupportedFormats:
    def test_contains_all_tags(self) -> None:
        formats = SupportedFormats()
        assert all(tag in formats for tag in ("pdf", "docx", "xlsx", "txt"))

    def test_does_not_contain_csv(self) -> None:
        assert "csv" not in SupportedFormats()


class TestScanResult:
    def test_match(self) -> None:
        result = ScanResult(path=Path("a.txt"), matched_term="PHI")
        assert result.is_match

    def test_no_match(self) -> None:
        result = ScanResult(path=Path("a.txt"))
        assert not result.is_match
        assert result.matched_term is None
