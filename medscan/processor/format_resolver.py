from pathlib import Path

from medscan.processor.exceptions import UnsupportedFormatError
from medscan.processor.models import SupportedFormats


def file_extension(path: Path | str) -> str:
    """Return the text after the last '.' of *path* (the whole path if none)."""
    return str(path).rsplit(".", 1)[-1]


class FormatResolver:
    """Maps an input path to its format tag by extension."""

    def __init__(
        self,
        supported: SupportedFormats,
        ignore_case: bool = False,
    ) -> None:
        self._supported = supported
        self._ignore_case = ignore_case

    def resolve(self, path: Path | str) -> str:
        """Return the format tag for *path*.

        Raises:
            UnsupportedFormatError: if the extension is not a supported tag.
        """
        extension = file_extension(path)
        if self._ignore_case:
            extension = extension.lower()
        if extension not in self._supported:
            raise UnsupportedFormatError(f"Unsupported file format: {extension}")
        return extension
