"""``.mcworld`` packaging."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

from mcbackup.exceptions import ArchiveError

logger = logging.getLogger(__name__)


def package_as_archive(source_dir: Path, dest_file: Path) -> Path:
    """Zip the contents of *source_dir* (paths relative to it) into *dest_file*.

    A partially written archive is removed before ``ArchiveError`` is raised.
    """
    if not source_dir.is_dir():
        raise ArchiveError(f"Archive source is not a directory: {source_dir}")

    dest_file.parent.mkdir(parents=True, exist_ok=True)
    try:
        with zipfile.ZipFile(dest_file, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for path in sorted(source_dir.rglob("*")):
                if path.is_file():
                    archive.write(path, arcname=path.relative_to(source_dir).as_posix())
    except (OSError, zipfile.BadZipFile, ValueError) as exc:
        dest_file.unlink(missing_ok=True)
        raise ArchiveError(f"Failed to create {dest_file.name}: {exc}") from exc

    logger.debug("Wrote archive %s", dest_file)
    return dest_file
