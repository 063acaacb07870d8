"""Render QR matrices as text for monospace terminals."""

from hashqr.qr_generator import QrMatrix

DARK_GLYPH = "█"  # Full block
LIGHT_GLYPH = " "


def render_text(
    matrix: QrMatrix,
    dark: str = DARK_GLYPH,
    light: str = LIGHT_GLYPH,
    module_width: int = 2,
) -> str:
    """Render the matrix as lines of glyphs, without quiet zone.

    Each module is ``module_width`` characters wide and one line tall, which
    keeps the symbol square in a terminal whose cells are about twice as
    tall as they are wide.
    """
    lines = []
    for row in matrix.modules:
        lines.append("".join((dark if cell else light) * module_width for cell in row))
    return "\n".join(lines)
