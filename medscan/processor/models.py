from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

MEDICAL_TERMS: tuple[str, ...] = (
    "dossier médical",
    "confidentiel médical",
    "PHI",
    "health information",
)

FORMATS: tuple[str, ...] = ("pdf", "docx", "xlsx", "txt")


@dataclass(frozen=True)
class SensitiveTermList:
    """Ordered, immutable vocabulary of sensitive terms."""

    terms: tuple[str, ...] = MEDICAL_TERMS

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)


@dataclass(frozen=True)
class SupportedFormats:
    """Immutable set of format tags the pipeline can extract and scan."""

    tags: frozenset[str] = frozenset(FORMATS)

    def __contains__(self, tag: object) -> bool:
        return tag in self.tags


@dataclass(frozen=True)
class InputFile:
    """Caller-owned input path and its resolved format tag."""

    path: Path
    format: str


@dataclass(frozen=True)
class ExtractedText:
    """Plain-text rendering of one input, stored in the run workspace."""

    source: InputFile
    path: Path


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning one extracted text: the first matching term or None."""

    path: Path
    matched_term: str | None = None

    @property
    def is_match(self) -> bool:
        return self.matched_term is not None
