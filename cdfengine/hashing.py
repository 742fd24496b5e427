"""Integer and padded string hashes used to key dictionaries and CDF keywords."""

from __future__ import annotations

import argparse

MAX_STR_LEN = 32
"""Length every string is padded to (with spaces) before hashing."""

_MASK = 0xFFFFFFFF
_INT_MULTIPLIER = 0x45D9F3B
_DJB2_SEED = 5381

KEYWORDS = (
    "object",
    "{",
    "}",
    "events",
    "a_events",
    "transitions",
    "float",
    "int",
    "states",
)
"""CDF keywords whose hashes the parser switches on."""


def hash_int(x: int) -> int:
    """Scramble an unsigned 32-bit integer into a well distributed 32-bit hash."""
    value = x & _MASK
    value = (((value >> 16) ^ value) * _INT_MULTIPLIER) & _MASK
    value = (((value >> 16) ^ value) * _INT_MULTIPLIER) & _MASK
    return (value >> 16) ^ value


def hash_str(text: str | bytes, padded_length: int = MAX_STR_LEN) -> int:
    """Return the djb2 hash of ``text`` padded with spaces to ``padded_length``.

    Bytes above 0x7F count as signed characters, as a plain ``char`` would.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = _DJB2_SEED
    for byte in data:
        char = byte - 256 if byte >= 0x80 else byte
        value = (value * 33 + char) & _MASK
    for _ in range(len(data), padded_length):
        value = (value * 33 + ord(" ")) & _MASK
    return value


def keyword_hashes() -> dict[str, int]:
    """Return the padded hash of every CDF keyword, in declaration order."""
    return {keyword: hash_str(keyword, MAX_STR_LEN) for keyword in KEYWORDS}


def main(argv: list[str] | None = None) -> int:
    """Print the hash of each CDF keyword, one per line."""
    parser = argparse.ArgumentParser(
        description="Print the padded hashes of the CDF keywords."
    )
    parser.parse_args(argv)
    for value in keyword_hashes().values():
        print(value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())