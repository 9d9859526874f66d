"""Substitution codec for identity strings crossing the wire.

Each plaintext character maps to a fixed two-character code. The table is a
persisted contract: values encoded by earlier builds must keep decoding, so
any change to it has to bump ``CODEC_VERSION``.
"""

from types import MappingProxyType

CODEC_VERSION = 1
CODE_WIDTH = 2

DECODE_TABLE = MappingProxyType({
    "04": "_",
    "da": "-",
    "6e": "/",
    "af": ":",
    "9a": ".",
    "86": "z",
    "d4": "y",
    "67": "x",
    "88": "w",
    "5b": "v",
    "ab": "u",
    "8b": "t",
    "4d": "s",
    "d5": "r",
    "ba": "q",
    "b7": "p",
    "52": "o",
    "cd": "n",
    "f1": "m",
    "e6": "l",
    "cc": "k",
    "ea": "j",
    "nb": "i",
    "0f": "h",
    "3e": "g",
    "23": "f",
    "a3": "e",
    "be": "d",
    "cf": "c",
    "a8": "b",
    "f9": "a",
    "b1": "9",
    "fc": "8",
    "d1": "7",
    "ff": "6",
    "6d": "5",
    "c4": "4",
    "0e": "3",
    "46": "2",
    "9d": "1",
    "20": "0",
})

ENCODE_TABLE = MappingProxyType({char: code for code, char in DECODE_TABLE.items()})

if len(ENCODE_TABLE) != len(DECODE_TABLE):
    raise RuntimeError("Codec decode table maps two codes to the same character")


class InvalidCharacterError(ValueError):
    """Raised when a value contains something the codec table cannot map."""

    def __init__(self, value: str, position: int) -> None:
        self.value = value
        self.position = position
        super().__init__(f"Cannot map {value!r} at position {position}")


def encode(text: str) -> str:
    """Encode a plaintext identity string.

    Args:
        text: Characters drawn from the codec alphabet.

    Returns:
        The concatenated two-character codes, in input order.

    Raises:
        InvalidCharacterError: A character has no code in the table.
    """
    codes = []
    for position, char in enumerate(text):
        code = ENCODE_TABLE.get(char)
        if code is None:
            raise InvalidCharacterError(char, position)
        codes.append(code)
    return "".join(codes)


def decode(text: str) -> str:
    """Decode a string produced by :func:`encode`.

    Raises:
        InvalidCharacterError: Trailing half code or an unknown code.
    """
    if len(text) % CODE_WIDTH:
        raise InvalidCharacterError(text[-1:], len(text) - 1)

    chars = []
    for position in range(0, len(text), CODE_WIDTH):
        code = text[position:position + CODE_WIDTH]
        char = DECODE_TABLE.get(code)
        if char is None:
            raise InvalidCharacterError(code, position)
        chars.append(char)
    return "".join(chars)
