"""String helpers used across the engine: case folding, trimming and path tweaks."""

from __future__ import annotations

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_LOWER_UNDERSCORE = str.maketrans(
    string.ascii_uppercase + " ", string.ascii_lowercase + "_"
)


def _check_single_char(char: str, what: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"{what} must be a single character, got {char!r}")


def bool_to_string(value: bool) -> str:
    """Return ``"true"`` or ``"false"``."""
    return str(bool(value)).lower()


def to_lower(text: str) -> str:
    """Lower-case ASCII letters only; other characters are left untouched."""
    return text.translate(_ASCII_LOWER)


def to_lower_and_underscore_whitespace(text: str) -> str:
    """Lower-case ASCII letters and turn every space into an underscore."""
    return text.translate(_ASCII_LOWER_UNDERSCORE)


def string_to_bytes(value: str) -> bytes:
    """Encode ``value`` as UTF-8 followed by a terminating NUL byte."""
    return value.encode("utf-8") + b"\x00"


def string_from_memory(data: bytes | bytearray | memoryview, size: int) -> str:
    """Decode the first ``size`` bytes of ``data``, stopping at an embedded NUL."""
    raw = bytes(data)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(raw):
        raise ValueError(f"size {size} exceeds the {len(raw)} bytes available")
    chunk = raw[:size]
    terminator = chunk.find(b"\x00")
    if terminator != -1:
        chunk = chunk[:terminator]
    return chunk.decode("utf-8")


def trim(value: str | None, delimiter: str) -> str | None:
    """Return the text before the last ``delimiter``, or all of it when absent."""
    if value is None:
        return None
    _check_single_char(delimiter, "delimiter")
    index = value.rfind(delimiter)
    return value if index == -1 else value[:index]


def trim_by_size(value: str, size: int) -> str:
    """Return the first ``size`` characters of ``value``."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(value):
        raise ValueError(f"size {size} exceeds the length {len(value)} of the value")
    return value[:size]


def trim_and_replace(value: str, delimiter: str, replacement: str) -> str:
    """Like :func:`trim`, then append ``replacement`` in place of the cut part."""
    trimmed = trim(value, delimiter)
    if trimmed is None:
        raise ValueError("value must not be None")
    return trimmed + replacement


def remove_char(text: str, char: str) -> str:
    """Return ``text`` with every occurrence of ``char`` removed."""
    _check_single_char(char, "char")
    return text.replace(char, "")


def project_archive_name(starting_path: str | None) -> str | None:
    """Swap the extension of ``starting_path`` for ``.zip``."""
    if starting_path is None:
        return None
    return trim_and_replace(starting_path, ".", ".zip")