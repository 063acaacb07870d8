"""Errors raised by the HashQR pipeline. All of them are fatal for a run."""


class HashQrError(Exception):
    """Base class for pipeline failures reported to the user."""


class EncodingError(HashQrError):
    """The payload cannot be represented as a QR symbol."""


class DirectoryCreationError(HashQrError):
    """The output directory is missing and could not be created."""


class FileWriteError(HashQrError):
    """The rendered image could not be written to its target path."""
