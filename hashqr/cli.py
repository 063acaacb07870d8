"""CLI entry points for HashQR.

Usage:
  hashqr [words...] [--png]     print a QR code, save img/<sha256>.png with --png
  hashqr-svg [words...]         print a QR code, save img/<sha256>.svg when forced

Setting FORCE_SAVE_PNG (any value) saves the image without the flag.
"""

import os
import sys

from hashqr.errors import HashQrError
from hashqr.input_resolver import get_input_string
from hashqr.pipeline import PNG, SVG, PipelineConfig, Variant, main_workflow


def run(argv: list[str], environ: dict[str, str], variant: Variant) -> int:
    payload = get_input_string(argv, variant.save_flag)
    config = PipelineConfig.from_environment(argv, environ, variant)

    try:
        main_workflow(payload, config)
    except HashQrError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    return run(sys.argv if argv is None else argv, dict(os.environ), PNG)


def main_svg(argv: list[str] | None = None) -> int:
    return run(sys.argv if argv is None else argv, dict(os.environ), SVG)


if __name__ == "__main__":
    sys.exit(main())
