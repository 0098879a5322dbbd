from typing import List, Optional

# Ordinals 1-26 decode to lowercase letters, 27-52 to uppercase letters.
LOWER_RANGE = range(1, 27)
UPPER_RANGE = range(27, 53)


def alpha_to_num(text: str) -> str:
    """
    Replace every ASCII letter with its position in the alphabet (A/a=1 .. Z/z=26).

    Other characters are kept literally. Every emitted token is followed by a
    single space and the final trailing space is dropped, so
    "Hello, World!" becomes "8 5 12 12 15 ,   23 15 18 12 4 !".
    """
    tokens: List[str] = []
    for ch in text:
        if "a" <= ch <= "z":
            tokens.append(str(ord(ch) - ord("a") + 1))
        elif "A" <= ch <= "Z":
            tokens.append(str(ord(ch) - ord("A") + 1))
        else:
            tokens.append(ch)
        tokens.append(" ")
    if tokens:
        tokens.pop()
    return "".join(tokens)


def _ordinal_to_letter(number: int) -> Optional[str]:
    if number in LOWER_RANGE:
        return chr(ord("a") + number - 1)
    if number in UPPER_RANGE:
        return chr(ord("A") + number - 27)
    return None


def num_to_alpha(cipher_text: str) -> str:
    """
    Convert whitespace separated ordinals back to letters.

    Numbers outside 1-52 are discarded and anything that is neither a digit nor
    whitespace is ignored, so punctuation kept by `alpha_to_num` does not survive
    the trip back.
    """
    decoded: List[str] = []
    buffer = ""

    def flush() -> None:
        if buffer:
            # Ordinals have at most two significant digits; longer runs are out of range.
            digits = buffer.lstrip("0")
            if len(digits) > 2:
                return
            letter = _ordinal_to_letter(int(digits or "0"))
            if letter is not None:
                decoded.append(letter)

    for ch in cipher_text:
        if "0" <= ch <= "9":
            buffer += ch
        elif ch.isspace():
            flush()
            buffer = ""
    flush()
    return "".join(decoded)
