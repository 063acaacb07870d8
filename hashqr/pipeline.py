"""Encode, render, optionally save, and print one payload per run."""

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from hashqr import FORCE_SAVE_ENV, OUTPUT_DIR, SAVE_FLAG
from hashqr.image_utils import image_to_png_bytes, render_qr_code_image, render_qr_code_svg
from hashqr.input_resolver import has_flag, payload_bytes
from hashqr.qr_generator import QrMatrix, encode_qr_code
from hashqr.storage import save_artifact
from hashqr.terminal import render_text


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

def _render_png(matrix: QrMatrix) -> bytes:
    return image_to_png_bytes(render_qr_code_image(matrix))


def _render_svg(matrix: QrMatrix) -> bytes:
    return render_qr_code_svg(matrix).encode("utf-8")


@dataclass(frozen=True)
class Variant:
    """Image format produced by a run and the flag that requests saving it."""

    name: str
    extension: str
    render: Callable[[QrMatrix], bytes]
    save_flag: str | None = None


PNG = Variant(name="png", extension="png", render=_render_png, save_flag=SAVE_FLAG)
SVG = Variant(name="svg", extension="svg", render=_render_svg)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass
class PipelineConfig:
    """Explicit settings for one run."""

    save: bool = False
    variant: Variant = PNG
    output_dir: Path = field(default_factory=lambda: Path(OUTPUT_DIR))

    @classmethod
    def from_environment(
        cls,
        argv: list[str],
        environ: Mapping[str, str],
        variant: Variant = PNG,
    ) -> "PipelineConfig":
        """Open the save gate if the variant's flag is in ``argv`` or the override variable is set."""
        flag_set = variant.save_flag is not None and has_flag(argv, variant.save_flag)
        return cls(save=flag_set or FORCE_SAVE_ENV in environ, variant=variant)


# ---------------------------------------------------------------------------
# Output sinks
# ---------------------------------------------------------------------------

class OutputSink(ABC):
    """Destination that receives a copy of the printed QR code."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        ...


class BufferSink(OutputSink):
    """Collects everything written to it in memory."""

    def __init__(self):
        self._chunks: list[bytes] = []

    def write(self, data: bytes) -> None:
        self._chunks.append(bytes(data))

    def getvalue(self) -> bytes:
        return b"".join(self._chunks)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

@dataclass
class PipelineResult:
    """What a run produced."""

    payload: str
    text: str
    saved_path: Path | None = None


def print_qr_code(matrix: QrMatrix, mirror: OutputSink | None = None) -> str:
    """Print the matrix as terminal text and copy it to ``mirror`` if given.

    A failing mirror is ignored; stdout is the primary channel.
    """
    printable = render_text(matrix)
    print(printable)
    sys.stdout.flush()

    if mirror is not None:
        try:
            mirror.write(printable.encode("utf-8"))
        except OSError:
            pass
    return printable


def main_workflow(
    payload: str,
    config: PipelineConfig | None = None,
    mirror: OutputSink | None = None,
) -> PipelineResult:
    """Run the whole pipeline for one payload.

    The image is rendered and saved only when ``config.save`` is set; the
    terminal QR code is always printed.

    Raises:
        EncodingError: If the payload cannot be encoded.
        DirectoryCreationError: If the output directory cannot be created.
        FileWriteError: If the image cannot be written.
    """
    config = config or PipelineConfig()
    matrix = encode_qr_code(payload)

    saved_path = None
    if config.save:
        data = config.variant.render(matrix)
        saved_path = save_artifact(
            data, payload, config.variant.extension, config.output_dir
        )
        # Raw argv bytes may not be printable as-is
        print(f"Input: {payload_bytes(payload).decode('utf-8', 'replace')}")
        print(f"Image saved as: {saved_path}")

    text = print_qr_code(matrix, mirror)
    return PipelineResult(payload=payload, text=text, saved_path=saved_path)
