"""
Explicit collation for Ukrainian and Latin names.

Ordering does not depend on the process locale:

1. Primary level, compared over the whole string:
   whitespace < other punctuation < digits < Latin letters < Cyrillic letters
   < anything else. Cyrillic follows the Ukrainian alphabet
   (Г < Ґ, Е < Є, И < І < Ї < Й), with the Russian-only letters slotted in
   where the Unicode collation places them. Accented Latin letters weigh as
   their base letter. Apostrophes are ignored.
2. Accents, unaccented before accented.
3. Case, lowercase before uppercase.
4. The raw string, so the order is total.
"""

import unicodedata
from typing import List, Tuple

CYRILLIC_ALPHABET = "абвгґдеёєжзиіїйклмнопрстуфхцчшщъыьэюя"
LATIN_ALPHABET = "abcdefghijklmnopqrstuvwxyz"
APOSTROPHES = frozenset("'’ʼ")

_CYRILLIC_RANK = {letter: rank for rank, letter in enumerate(CYRILLIC_ALPHABET)}
_LATIN_RANK = {letter: rank for rank, letter in enumerate(LATIN_ALPHABET)}

WHITESPACE, PUNCTUATION, DIGIT, LATIN, CYRILLIC, OTHER = range(6)

Weight = Tuple[int, int]


def _weights(char: str) -> Tuple[Weight, str]:
    """Primary weight and accent marks of one character"""
    lower = char.lower()
    if char.isspace():
        return (WHITESPACE, 0), ""
    if lower in _LATIN_RANK:
        return (LATIN, _LATIN_RANK[lower]), ""
    # Й, Ї and Ё are letters of their own, looked up before decomposition
    if lower in _CYRILLIC_RANK:
        return (CYRILLIC, _CYRILLIC_RANK[lower]), ""

    decomposed = unicodedata.normalize("NFD", lower)
    base, marks = decomposed[0], decomposed[1:]
    if base in _LATIN_RANK:
        return (LATIN, _LATIN_RANK[base]), marks
    if base in _CYRILLIC_RANK:
        return (CYRILLIC, _CYRILLIC_RANK[base]), marks

    if char.isdecimal():
        return (DIGIT, int(char)), ""
    if not char.isalnum():
        return (PUNCTUATION, ord(char)), ""
    return (OTHER, ord(lower)), ""


def collation_key(
    text: str,
) -> Tuple[Tuple[Weight, ...], Tuple[str, ...], Tuple[int, ...], str]:
    """Sort key for ``sorted(..., key=collation_key)``"""
    primary: List[Weight] = []
    accents: List[str] = []
    case: List[int] = []
    for char in text:
        if char in APOSTROPHES:
            continue
        weight, marks = _weights(char)
        primary.append(weight)
        accents.append(marks)
        case.append(1 if char.isupper() else 0)
    return tuple(primary), tuple(accents), tuple(case), text
