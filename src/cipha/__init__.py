"""Classical text ciphers: ROT13, Caesar, Vigenere, Atbash, Morse, gematria, rail fence, reverse."""

__version__ = "0.1.0"

from .classical import (
    MORSE_CODE,
    MORSE_REVERSE,
    atbash,
    atbash_decipher,
    atbash_encipher,
    caesar_decipher,
    caesar_encipher,
    morse_decode,
    morse_encode,
    rail_fence_decipher,
    rail_fence_encipher,
    rot13,
    shift_letter,
    shift_text,
    vigenere_decipher,
    vigenere_encipher,
)
from .gematria import alpha_to_num, num_to_alpha
from .utils import reverse_string
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
from .dispatcher import (
    UNSUPPORTED_CIPHER,
    CiphaError,
    FileUnreadableError,
    MissingInputError,
    UnknownCipherError,
    decode_message,
    encode_message,
    get_message,
    run_cipher,
    supported_ciphers,
)
