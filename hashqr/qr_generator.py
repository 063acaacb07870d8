"""Encode payloads into QR module grids."""

from dataclasses import dataclass, field

import qrcode
from qrcode.exceptions import DataOverflowError

from hashqr.errors import EncodingError
from hashqr.input_resolver import payload_bytes


@dataclass(frozen=True)
class QrMatrix:
    """Dark/light module grid of one QR symbol, without quiet zone.

    ``modules[y][x]`` is True for a dark module. ``qr`` is the encoder
    object the grid came from, kept for image rendering.
    """

    modules: tuple[tuple[bool, ...], ...]
    version: int
    qr: qrcode.QRCode | None = field(default=None, compare=False, repr=False)

    @property
    def size(self) -> int:
        return len(self.modules)

    def dark_count(self) -> int:
        return sum(row.count(True) for row in self.modules)


def encode_qr_code(payload: str) -> QrMatrix:
    """Encode a payload at the default error correction level (M).

    The smallest symbol version that fits the payload's bytes is chosen
    automatically, so the same payload always yields the same grid.

    Args:
        payload: Text to encode. May be empty.

    Returns:
        The immutable module grid.

    Raises:
        EncodingError: If the payload has no byte form or exceeds the
            capacity of a version 40 symbol.
    """
    try:
        data = payload_bytes(payload)
    except UnicodeEncodeError as e:
        raise EncodingError(f"Payload cannot be encoded: {e}") from e

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        border=0,
    )
    qr.add_data(data)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        # Overflow past version 40 surfaces as "Invalid version" ValueError
        raise EncodingError(
            f"Payload too long for a QR code ({len(data)} bytes)."
        ) from e

    modules = tuple(tuple(bool(cell) for cell in row) for row in qr.get_matrix())
    return QrMatrix(modules=modules, version=qr.version, qr=qr)
