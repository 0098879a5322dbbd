"""
Name based dispatch from the command line onto the transform library.

The transforms never raise for odd input; everything that can go wrong while
assembling a request (no message, unreadable file, unknown cipher name in
strict mode) is reported here with the exceptions below.
"""

from typing import Any, List, Optional

from .ciphers import (
    AlphaNumConverter,
    AtbashCipher,
    CaesarCipher,
    MorseCode,
    RailFenceCipher,
    ReverseCipher,
    Rot13Cipher,
    VigenereCipher,
)
from .config import DEFAULT_RAILS, DEFAULT_SHIFT
from .plugin import CipherPlugin, get_plugin, list_plugins, register_cipher
from .utils import DEFAULT_ENCODING, read_text

UNSUPPORTED_CIPHER = "Unsupported cipher"
UNSUPPORTED_COMMAND = "Unsupported command"
MODES = ("encode", "decode")


class CiphaError(RuntimeError):
    """Base class for errors reported at the dispatch boundary."""


class MissingInputError(CiphaError):
    """Raised when neither a message nor a file was supplied."""


class FileUnreadableError(CiphaError):
    """Raised when the input file cannot be opened or decoded."""


class UnknownCipherError(CiphaError):
    """Raised in strict mode when the cipher name is not registered."""


@register_cipher
class Rot13Plugin(CipherPlugin):
    name = "rot13"
    description = "ROT13 letter rotation (self-inverse)."

    def encode(self, text: str, **params: Any) -> str:
        return Rot13Cipher().encipher(text)

    def decode(self, text: str, **params: Any) -> str:
        return Rot13Cipher().decipher(text)


@register_cipher
class CaesarPlugin(CipherPlugin):
    name = "caesar"
    description = "Caesar shift by --shift positions (default 3)."
    params = ("shift",)

    def _cipher(self, shift: Optional[int] = None, **params: Any) -> CaesarCipher:
        return CaesarCipher(DEFAULT_SHIFT if shift is None else shift)

    def encode(self, text: str, **params: Any) -> str:
        return self._cipher(**params).encipher(text)

    def decode(self, text: str, **params: Any) -> str:
        return self._cipher(**params).decipher(text)


@register_cipher
class ReversePlugin(CipherPlugin):
    name = "reverse"
    description = "Reverse the message."

    def encode(self, text: str, **params: Any) -> str:
        return ReverseCipher().encipher(text)

    def decode(self, text: str, **params: Any) -> str:
        return ReverseCipher().decipher(text)


@register_cipher
class GematriaPlugin(CipherPlugin):
    name = "gematria"
    description = "Letters to alphabet positions (A=1 .. Z=26) and back."

    def encode(self, text: str, **params: Any) -> str:
        return AlphaNumConverter().alpha_to_num(text)

    def decode(self, text: str, **params: Any) -> str:
        return AlphaNumConverter().num_to_alpha(text)


@register_cipher
class VigenerePlugin(CipherPlugin):
    name = "vigenere"
    description = "Vigenere cipher keyed by --key (empty key leaves text unchanged)."
    params = ("key",)

    def _cipher(self, key: Optional[str] = None, **params: Any) -> VigenereCipher:
        return VigenereCipher(key or "")

    def encode(self, text: str, **params: Any) -> str:
        return self._cipher(**params).encipher(text)

    def decode(self, text: str, **params: Any) -> str:
        return self._cipher(**params).decipher(text)


@register_cipher
class MorsePlugin(CipherPlugin):
    name = "morse"
    description = "International Morse code, words separated by '/'."

    def encode(self, text: str, **params: Any) -> str:
        return MorseCode().encode(text)

    def decode(self, text: str, **params: Any) -> str:
        return MorseCode().decode(text)


@register_cipher
class AtbashPlugin(CipherPlugin):
    name = "atbash"
    description = "Atbash mirror substitution (self-inverse)."

    def encode(self, text: str, **params: Any) -> str:
        return AtbashCipher().encipher(text)

    def decode(self, text: str, **params: Any) -> str:
        return AtbashCipher().decipher(text)


@register_cipher
class RailFencePlugin(CipherPlugin):
    name = "railfence"
    description = "Rail fence transposition over --rails rows (default 3)."
    params = ("rails",)

    def _cipher(self, rails: Optional[int] = None, **params: Any) -> RailFenceCipher:
        return RailFenceCipher(DEFAULT_RAILS if rails is None else rails)

    def encode(self, text: str, **params: Any) -> str:
        return self._cipher(**params).encipher(text)

    def decode(self, text: str, **params: Any) -> str:
        return self._cipher(**params).decipher(text)


def supported_ciphers() -> List[str]:
    return sorted(list_plugins())


def get_message(
    message: Optional[str],
    file: Optional[str],
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """
    Pick the input text: an inline message wins over a file.
    """
    if message is not None:
        return message
    if file:
        try:
            return read_text(file, encoding=encoding)
        except OSError as exc:
            raise FileUnreadableError(f"Could not open file: {exc}") from exc
        except (UnicodeDecodeError, LookupError) as exc:
            raise FileUnreadableError(f"Could not read file {file} as {encoding}: {exc}") from exc
    raise MissingInputError("Either --message or --file must be provided")


def run_cipher(
    mode: str,
    cipher: str,
    message: str,
    shift: Optional[int] = None,
    key: Optional[str] = None,
    rails: Optional[int] = None,
    strict: bool = False,
) -> str:
    """
    Encode or decode `message` with the cipher registered under `cipher`.

    Unknown names give back the "Unsupported cipher" sentinel unless `strict`
    is set, in which case `UnknownCipherError` is raised.
    """
    if mode not in MODES:
        if strict:
            raise ValueError(f"Unsupported mode: {mode}")
        return UNSUPPORTED_COMMAND
    plugin = get_plugin(cipher)
    if plugin is None:
        if strict:
            raise UnknownCipherError(
                f"Unsupported cipher: {cipher} (choose from {', '.join(supported_ciphers())})"
            )
        return UNSUPPORTED_CIPHER
    if mode == "encode":
        return plugin.encode(message, shift=shift, key=key, rails=rails)
    return plugin.decode(message, shift=shift, key=key, rails=rails)


def encode_message(
    cipher: str,
    message: str,
    shift: Optional[int] = None,
    key: Optional[str] = None,
    rails: Optional[int] = None,
) -> str:
    return run_cipher("encode", cipher, message, shift=shift, key=key, rails=rails)


def decode_message(
    cipher: str,
    message: str,
    shift: Optional[int] = None,
    key: Optional[str] = None,
    rails: Optional[int] = None,
) -> str:
    return run_cipher("decode", cipher, message, shift=shift, key=key, rails=rails)
