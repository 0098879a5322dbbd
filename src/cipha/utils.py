from pathlib import Path
from typing import Union

DEFAULT_ENCODING = "utf-8"


def reverse_string(text: str) -> str:
    """Return the string reversed (by code point, combining marks are not kept together)."""
    return text[::-1]


def read_text(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read a whole file as text.

    Decoding is strict: undecodable bytes raise `UnicodeDecodeError` rather than
    being replaced, and `OSError` from opening the file propagates unchanged.
    """
    with open(path, "rb") as fh:
        content = fh.read()
    return content.decode(encoding)


def write_text(path: Union[str, Path], text: str, encoding: str = DEFAULT_ENCODING) -> None:
    with open(path, "w", encoding=encoding, newline="") as fh:
        fh.write(text)
