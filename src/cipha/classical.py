from collections import defaultdict
from typing import Dict, List

# International Morse Code for letters, digits, the word separator and common
# punctuation. Every code is unique so the table inverts cleanly.
MORSE_CODE: Dict[str, str] = {
    "A": ".-",
    "B": "-...",
    "C": "-.-.",
    "D": "-..",
    "E": ".",
    "F": "..-.",
    "G": "--.",
    "H": "....",
    "I": "..",
    "J": ".---",
    "K": "-.-",
    "L": ".-..",
    "M": "--",
    "N": "-.",
    "O": "---",
    "P": ".--.",
    "Q": "--.-",
    "R": ".-.",
    "S": "...",
    "T": "-",
    "U": "..-",
    "V": "...-",
    "W": ".--",
    "X": "-..-",
    "Y": "-.--",
    "Z": "--..",
    "0": "-----",
    "1": ".----",
    "2": "..---",
    "3": "...--",
    "4": "....-",
    "5": ".....",
    "6": "-....",
    "7": "--...",
    "8": "---..",
    "9": "----.",
    " ": "/",
    ".": ".-.-.-",
    ",": "--..--",
    "?": "..--..",
    ";": "-.-.-.",
    ":": "---...",
    "-": "-....-",
    "/": "-..-.",
    "'": ".----.",
    '"': ".-..-.",
    "=": "-...-",
    "_": "..--.-",
    "+": ".-.-.",
    "(": "-.--.",
    ")": "-.--.-",
}

MORSE_REVERSE: Dict[str, str] = {code: symbol for symbol, code in MORSE_CODE.items()}

ALPHABET_SIZE = 26


def shift_letter(char: str, shift: int) -> str:
    """
    Move an ASCII letter `shift` places along its own case's alphabet.
    Anything that is not an ASCII letter is returned unchanged.
    """
    if "a" <= char <= "z":
        offset = ord("a")
    elif "A" <= char <= "Z":
        offset = ord("A")
    else:
        return char
    return chr(offset + (ord(char) - offset + shift) % ALPHABET_SIZE)


def shift_text(text: str, shift: int) -> str:
    """Apply `shift_letter` to every character of `text`."""
    normalized_shift = shift % ALPHABET_SIZE
    if normalized_shift == 0:
        return text
    return "".join(shift_letter(char, normalized_shift) for char in text)


def rot13(text: str) -> str:
    """ROT13 convenience wrapper around the alphabet shift. Self-inverse."""
    return shift_text(text, 13)


def caesar_encipher(text: str, shift: int) -> str:
    """
    Shift alphabetic characters forward by `shift` positions (wraps through A-Z/a-z).
    Non-alphabetic characters are left unchanged.
    """
    return shift_text(text, shift)


def caesar_decipher(text: str, shift: int) -> str:
    """Undo `caesar_encipher` by shifting forward the rest of the way round."""
    return shift_text(text, ALPHABET_SIZE - shift % ALPHABET_SIZE)


def _key_shifts(key: str) -> List[int]:
    return [ord(k) - ord("a") for k in key.lower() if "a" <= k <= "z"]


def _vigenere(text: str, key: str, direction: int) -> str:
    key_shifts = _key_shifts(key)
    if not key_shifts:
        return text
    result: List[str] = []
    idx = 0
    for ch in text:
        if ("a" <= ch <= "z") or ("A" <= ch <= "Z"):
            shift = key_shifts[idx % len(key_shifts)]
            idx += 1
            result.append(shift_letter(ch, direction * shift))
        else:
            result.append(ch)
    return "".join(result)


def vigenere_encipher(text: str, key: str) -> str:
    """
    Encrypt text using the Vigenere cipher (ASCII letters only affected).

    The key position only advances on letters, so punctuation and spaces in the
    plaintext do not consume key characters. An empty key leaves the text as-is.
    """
    return _vigenere(text, key, 1)


def vigenere_decipher(text: str, key: str) -> str:
    """Decrypt Vigenere cipher."""
    return _vigenere(text, key, -1)


def atbash(text: str) -> str:
    """
    Atbash substitution (A<->Z, a<->z).
    """
    result: List[str] = []
    for ch in text:
        if "A" <= ch <= "Z":
            result.append(chr(ord("A") + 25 - (ord(ch) - ord("A"))))
        elif "a" <= ch <= "z":
            result.append(chr(ord("a") + 25 - (ord(ch) - ord("a"))))
        else:
            result.append(ch)
    return "".join(result)


atbash_encipher = atbash
atbash_decipher = atbash


def morse_encode(text: str) -> str:
    """
    Encode a message into Morse code.

    Symbols are separated with single spaces and a space in the message becomes
    "/". Characters without a Morse code are dropped.
    """
    return " ".join(MORSE_CODE[char] for char in text.upper() if char in MORSE_CODE)


def morse_decode(code: str) -> str:
    """
    Decode a Morse code message back into text.

    Tokens are split on single spaces; unknown tokens are skipped.
    """
    return "".join(MORSE_REVERSE[symbol] for symbol in code.split(" ") if symbol in MORSE_REVERSE)


def _zigzag(length: int, rails: int) -> List[int]:
    """Rail index visited by each of `length` characters: 0, 1, .., rails-1, rails-2, .., 1, 0, 1, .."""
    pattern: List[int] = []
    rail_index = 0
    direction = 1  # 1 for moving down, -1 for moving up
    for _ in range(length):
        pattern.append(rail_index)
        if rail_index == 0:
            direction = 1
        elif rail_index == rails - 1:
            direction = -1
        rail_index += direction
    return pattern


def _check_rails(rails: int) -> None:
    if rails < 1:
        raise ValueError(f"Rail count must be at least 1, got {rails}.")


def rail_fence_encipher(text: str, rails: int) -> str:
    """
    Encrypt text using a Rail Fence cipher with the specified number of rails.
    """
    _check_rails(rails)
    if rails == 1 or rails >= len(text):
        return text

    fence: List[List[str]] = [[] for _ in range(rails)]
    for char, rail in zip(text, _zigzag(len(text), rails)):
        fence[rail].append(char)
    return "".join("".join(row) for row in fence)


def rail_fence_decipher(ciphertext: str, rails: int) -> str:
    """
    Decrypt a Rail Fence cipher with the specified number of rails.
    """
    _check_rails(rails)
    if rails == 1 or rails >= len(ciphertext):
        return ciphertext

    pattern = _zigzag(len(ciphertext), rails)

    # Count how many characters go to each rail.
    counts: Dict[int, int] = defaultdict(int)
    for rail in pattern:
        counts[rail] += 1

    # Split ciphertext into slices per rail.
    rail_slices: List[str] = []
    start = 0
    for rail in range(rails):
        end = start + counts[rail]
        rail_slices.append(ciphertext[start:end])
        start = end

    # Rebuild plaintext by consuming from each rail in pattern order.
    rail_positions = [0] * rails
    plaintext_chars: List[str] = []
    for rail in pattern:
        plaintext_chars.append(rail_slices[rail][rail_positions[rail]])
        rail_positions[rail] += 1

    return "".join(plaintext_chars)
