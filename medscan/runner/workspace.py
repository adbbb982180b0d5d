import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from medscan.logging.console import Console
from medscan.logging.logger import Log


@contextmanager
def workspace(directory: Path | None = None) -> Iterator[Path]:
    """Create a fresh run workspace and remove it on every exit path.

    The workspace is always a new ``medscan-*`` directory, created under
    *directory* when given, otherwise under the system temp dir. Only that
    directory is removed; *directory* and its other contents are left alone.
    """
    if directory is not None:
        directory.mkdir(parents=True, exist_ok=True)
    path = Path(tempfile.mkdtemp(prefix="medscan-", dir=directory))
    Log.debug(f"Workspace created at {path}")
    try:
        yield path
    finally:
        if path.is_dir():
            shutil.rmtree(path)
            Console.info("Temporary files removed.")
