import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from uuid import uuid4

from fastapi import UploadFile

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def discard(path: Path) -> None:
    """Delete a staged file; failures are logged and never raised."""
    try:
        path.unlink(missing_ok=True)
    except OSError:
        logger.exception("Error cleaning up temp file %s", path)


@contextmanager
def staged_file(path: Path) -> Iterator[Path]:
    """Yield ``path`` and delete it once the block exits, however it exits."""
    try:
        yield path
    finally:
        discard(path)


async def stage_upload(upload: UploadFile, directory: Path) -> Path:
    """Copy a multipart payload into a fresh file under ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / uuid4().hex
    try:
        with target.open("wb") as fh:
            while chunk := await upload.read(CHUNK_SIZE):
                fh.write(chunk)
    except BaseException:
        discard(target)
        raise
    return target
