"""Content-addressed naming and persistence of rendered images."""

import hashlib
from pathlib import Path

from hashqr import OUTPUT_DIR
from hashqr.errors import DirectoryCreationError, FileWriteError
from hashqr.input_resolver import payload_bytes


def content_hash(payload: str) -> str:
    """SHA-256 of the payload's raw bytes as 64 lowercase hex digits."""
    return hashlib.sha256(payload_bytes(payload)).hexdigest()


def output_path(payload: str, extension: str, directory: str | Path = OUTPUT_DIR) -> Path:
    """Path the image for ``payload`` is saved under, e.g. ``img/<hash>.png``."""
    return Path(directory) / f"{content_hash(payload)}.{extension}"


def ensure_directory(directory: str | Path) -> Path:
    """Create ``directory`` (and parents) unless it already exists.

    Raises:
        DirectoryCreationError: If the directory cannot be created.
    """
    path = Path(directory)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(f"Unable to create '{path}' folder: {e}") from e
    return path


def save_artifact(
    data: bytes,
    payload: str,
    extension: str,
    directory: str | Path = OUTPUT_DIR,
) -> Path:
    """Write serialized image data to the content-addressed path for ``payload``.

    An existing file at that path is overwritten, so saving the same
    payload twice leaves exactly one file.

    Args:
        data: Serialized image (PNG bytes or UTF-8 SVG text).
        payload: The original input; its hash names the file.
        extension: File extension without the dot.
        directory: Output directory, created on demand.

    Returns:
        The path written.

    Raises:
        DirectoryCreationError: If the output directory cannot be created.
        FileWriteError: If the file cannot be written.
    """
    ensure_directory(directory)
    path = output_path(payload, extension, directory)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise FileWriteError(f"Error saving image to '{path}': {e}") from e
    return path
