"""
Object forms of the transforms in `classical`, `gematria` and `utils`.

Each class only stores its parameter and delegates to the functional
implementation, so both styles always produce the same output.
"""

from .classical import (
    atbash,
    caesar_decipher,
    caesar_encipher,
    morse_decode,
    morse_encode,
    rail_fence_decipher,
    rail_fence_encipher,
    rot13,
    vigenere_decipher,
    vigenere_encipher,
)
from .gematria import alpha_to_num, num_to_alpha
from .utils import reverse_string


class Rot13Cipher:
    def encipher(self, message: str) -> str:
        return rot13(message)

    def decipher(self, message: str) -> str:
        # ROT13 is symmetric.
        return rot13(message)


class CaesarCipher:
    def __init__(self, shift: int = 3) -> None:
        self.shift = shift

    def encipher(self, message: str) -> str:
        return caesar_encipher(message, self.shift)

    def decipher(self, message: str) -> str:
        return caesar_decipher(message, self.shift)


class VigenereCipher:
    def __init__(self, key: str = "") -> None:
        self.key = key

    def encipher(self, plaintext: str) -> str:
        return vigenere_encipher(plaintext, self.key)

    def decipher(self, ciphertext: str) -> str:
        return vigenere_decipher(ciphertext, self.key)


class AtbashCipher:
    def transform(self, text: str) -> str:
        return atbash(text)

    encipher = transform
    decipher = transform


class MorseCode:
    def encode(self, text: str) -> str:
        return morse_encode(text)

    def decode(self, code: str) -> str:
        return morse_decode(code)


class AlphaNumConverter:
    def alpha_to_num(self, text: str) -> str:
        return alpha_to_num(text)

    def num_to_alpha(self, cipher_text: str) -> str:
        return num_to_alpha(cipher_text)


class RailFenceCipher:
    def __init__(self, rails: int = 3) -> None:
        if rails < 1:
            raise ValueError(f"Rail count must be at least 1, got {rails}.")
        self.rails = rails

    def encipher(self, plaintext: str) -> str:
        return rail_fence_encipher(plaintext, self.rails)

    def decipher(self, ciphertext: str) -> str:
        return rail_fence_decipher(ciphertext, self.rails)


class ReverseCipher:
    def encipher(self, message: str) -> str:
        return reverse_string(message)

    decipher = encipher
