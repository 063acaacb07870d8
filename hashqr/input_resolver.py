"""Turn raw process arguments into the text payload to encode."""

from hashqr import SAVE_FLAG


def payload_bytes(payload: str) -> bytes:
    """Raw bytes of a payload.

    Arguments that were not valid UTF-8 reach Python as surrogate escapes;
    they map back to the exact bytes given on the command line.

    Raises:
        UnicodeEncodeError: For surrogates that do not stand for a raw byte.
    """
    return payload.encode("utf-8", "surrogateescape")


def strip_flag(args: list[str], flag: str | None = SAVE_FLAG) -> list[str]:
    """Return a copy of ``args`` with every exact occurrence of ``flag`` removed."""
    return [arg for arg in args if flag is None or arg != flag]


def has_flag(args: list[str], flag: str = SAVE_FLAG) -> bool:
    return flag in args[1:]


def get_input_string(args: list[str], flag: str | None = SAVE_FLAG) -> str:
    """Build the payload from an argv-style list.

    ``args[0]`` is the program name and is never part of the payload. The
    save flag may appear anywhere and is dropped; the remaining words are
    joined with single spaces in their original order. No words at all
    gives the empty payload.

    Args:
        args: Process arguments, program name first.
        flag: Token to strip before joining, or None to keep every word.

    Returns:
        The payload string (possibly empty).
    """
    return " ".join(strip_flag(args[1:], flag))
