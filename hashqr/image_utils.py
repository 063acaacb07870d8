"""Raster and vector image rendering of QR matrices."""

import copy
import io
import math

from PIL import Image
from qrcode.image.pil import PilImage

from hashqr import DARK_COLOR, LIGHT_COLOR, MIN_SVG_SIZE, QUIET_ZONE
from hashqr.qr_generator import QrMatrix


def render_qr_code_image(
    matrix: QrMatrix,
    module_size: int = 1,
    border: int = QUIET_ZONE,
) -> Image.Image:
    """Render the matrix as a single-channel luma image.

    Dark modules are 0 (black) and light modules 255 (white). The symbol
    is surrounded by ``border`` light modules, which is the quiet zone a
    scanner expects.

    Args:
        matrix: QR symbol from ``encode_qr_code``.
        module_size: Pixels per module edge. Default 1.
        border: Quiet zone width in modules. Default 4.

    Returns:
        PIL Image in mode "L".

    Raises:
        ValueError: If the matrix was not produced by the encoder.
    """
    if matrix.qr is None:
        raise ValueError("Matrix has no encoder state to render from.")

    # Copy so the shared encoder keeps its own box size and border
    qr = copy.copy(matrix.qr)
    qr.box_size = module_size
    qr.border = border

    qr_image = qr.make_image(image_factory=PilImage, fill_color="black", back_color="white")
    return qr_image.convert("L")


def image_to_png_bytes(image: Image.Image) -> bytes:
    """Serialize an image as PNG."""
    buffer = io.BytesIO()
    image.save(buffer, "PNG")
    return buffer.getvalue()


def svg_scale(matrix: QrMatrix, min_size: int = MIN_SVG_SIZE, border: int = QUIET_ZONE) -> int:
    """Smallest integer module size that makes the whole symbol at least ``min_size`` wide."""
    side = matrix.size + 2 * border
    return max(1, math.ceil(min_size / side))


def render_qr_code_svg(
    matrix: QrMatrix,
    dark_color: str = DARK_COLOR,
    light_color: str = LIGHT_COLOR,
    min_size: int = MIN_SVG_SIZE,
    border: int = QUIET_ZONE,
) -> str:
    """Render the matrix as an SVG document.

    Small symbols are scaled up until the drawing is at least
    ``min_size`` x ``min_size``; larger ones keep one unit per module.
    """
    scale = svg_scale(matrix, min_size, border)
    dim = (matrix.size + 2 * border) * scale
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>\n',
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="{dim}" height="{dim}"',
        f' viewBox="0 0 {dim} {dim}" shape-rendering="crispEdges">',
        f'<rect width="{dim}" height="{dim}" fill="{light_color}"/>',
    ]
    for y, row in enumerate(matrix.modules):
        for x, dark in enumerate(row):
            if dark:
                parts.append(
                    f'<rect x="{(x + border) * scale}" y="{(y + border) * scale}"'
                    f' width="{scale}" height="{scale}" fill="{dark_color}"/>'
                )
    parts.append("</svg>\n")
    return "".join(parts)
