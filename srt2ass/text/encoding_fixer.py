"""Repair of Vietnamese mojibake produced by mis-decoded UTF-8.

Legacy Vietnamese subtitle files are often UTF-8 bytes that some tool decoded
with a single-byte Western codepage and saved again. Each accented letter then
shows up as a fixed two or three character sequence, e.g. ``ạ`` becomes
``áº¡``. The replacement table is derived once at import time by re-decoding
the UTF-8 bytes of every Vietnamese letter with the codepages that produce
this corruption in practice.
"""

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

VIETNAMESE_LOWERCASE = (
    "àáảãạăằắẳẵặâầấẩẫậ"
    "đ"
    "èéẻẽẹêềếểễệ"
    "ìíỉĩị"
    "òóỏõọôồốổỗộơờớởỡợ"
    "ùúủũụưừứửữự"
    "ỳýỷỹỵ"
)
VIETNAMESE_UPPERCASE = VIETNAMESE_LOWERCASE.upper()
VIETNAMESE_LETTERS = VIETNAMESE_LOWERCASE + VIETNAMESE_UPPERCASE

# Windows-Vietnamese first: it is what legacy Vietnamese systems default to.
MISDECODING_CODEPAGES = ("cp1258", "cp1252", "latin-1")


def misdecode(text: str, codepage: str) -> str:
    """Reproduce the corruption of reading UTF-8 bytes with a single-byte codepage.

    Bytes the codepage leaves undefined map to the C1 control with the same
    number, which is what browsers and Latin-1 decoders emit for them.

    Args:
        text: Correct Unicode text.
        codepage: Python codec name of a single-byte codepage.

    Returns:
        The mojibake string a mis-decoding tool would have produced.
    """
    chars: list[str] = []
    for byte in text.encode("utf-8"):
        try:
            chars.append(bytes([byte]).decode(codepage))
        except UnicodeDecodeError:
            chars.append(chr(byte))
    return "".join(chars)


def build_fix_table(letters: Iterable[str], codepages: Iterable[str]) -> dict[str, str]:
    """Map each corrupted sequence to the letter it came from.

    Args:
        letters: Letters to generate corruption patterns for.
        codepages: Codepages to simulate, in priority order.

    Returns:
        Dictionary of mojibake sequence -> correct letter. When two letters
        would produce the same sequence the first one wins.
    """
    table: dict[str, str] = {}
    codepage_list = list(codepages)
    for letter in letters:
        for codepage in codepage_list:
            corrupted = misdecode(letter, codepage)
            if corrupted != letter:
                table.setdefault(corrupted, letter)
    return table


class EncodingFixer:
    """Replace known mojibake sequences with the correct Unicode letters."""

    def __init__(self, table: Mapping[str, str]) -> None:
        """Initialize the fixer with a replacement table.

        Args:
            table: Mapping of corrupted sequence -> replacement.
        """
        self._table: Mapping[str, str] = MappingProxyType(dict(table))
        # Longest first so no sequence is consumed by a shorter one that prefixes it.
        keys = sorted(self._table, key=lambda key: (-len(key), key))
        self._pattern = re.compile("|".join(re.escape(key) for key in keys)) if keys else None

    @property
    def table(self) -> Mapping[str, str]:
        """Read-only view of the replacement table."""
        return self._table

    def fix(self, text: str) -> str:
        """Replace every known corrupted sequence in text.

        Args:
            text: Possibly corrupted text.

        Returns:
            Text with every occurrence repaired; unmatched text is unchanged.
        """
        if not text or self._pattern is None:
            return text
        return self._pattern.sub(lambda match: self._table[match.group(0)], text)


VIETNAMESE_FIX_TABLE: Mapping[str, str] = MappingProxyType(build_fix_table(VIETNAMESE_LETTERS, MISDECODING_CODEPAGES))

_DEFAULT_FIXER = EncodingFixer(VIETNAMESE_FIX_TABLE)


def fix_encoding(text: str) -> str:
    """Repair Vietnamese mojibake using the shared default table."""
    return _DEFAULT_FIXER.fix(text)
