"""Codepoint classification used by the word and object selectors."""

from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Callable, Collection


class WordType(str, Enum):
    """``WORD`` splits on punctuation too; ``BIG_WORD`` only on blanks."""

    WORD = "word"
    BIG_WORD = "WORD"


class CharCategory(str, Enum):
    WORD = "word"
    PUNCTUATION = "punctuation"
    BLANK = "blank"
    END_OF_LINE = "end_of_line"


def is_eol(char: str) -> bool:
    return char == "\n"


def is_horizontal_blank(char: str) -> bool:
    if char in " \t\r":
        return True
    return not is_eol(char) and unicodedata.category(char) == "Zs"


def is_blank(char: str) -> bool:
    return is_eol(char) or is_horizontal_blank(char)


def _is_plain_word(char: str, extra_word_chars: Collection[str]) -> bool:
    return char.isalnum() or char in extra_word_chars


def _is_big_word(char: str, extra_word_chars: Collection[str]) -> bool:
    del extra_word_chars
    return not is_blank(char)


_WORD_PREDICATES: dict[WordType, Callable[[str, Collection[str]], bool]] = {
    WordType.WORD: _is_plain_word,
    WordType.BIG_WORD: _is_big_word,
}


def is_word(
    char: str,
    word_type: WordType = WordType.WORD,
    extra_word_chars: Collection[str] = ("_",),
) -> bool:
    return _WORD_PREDICATES[word_type](char, extra_word_chars)


def is_punctuation(char: str, extra_word_chars: Collection[str] = ("_",)) -> bool:
    return not (_is_plain_word(char, extra_word_chars) or is_blank(char))


def categorize(
    char: str,
    word_type: WordType = WordType.WORD,
    extra_word_chars: Collection[str] = ("_",),
) -> CharCategory:
    if is_eol(char):
        return CharCategory.END_OF_LINE
    if is_horizontal_blank(char):
        return CharCategory.BLANK
    if is_word(char, word_type, extra_word_chars):
        return CharCategory.WORD
    return CharCategory.PUNCTUATION


def word_predicate(
    word_type: WordType, extra_word_chars: Collection[str]
) -> Callable[[str], bool]:
    """Bind ``is_word`` for repeated use inside a scan."""

    predicate = _WORD_PREDICATES[word_type]
    return lambda char: predicate(char, extra_word_chars)


__all__ = [
    "CharCategory",
    "WordType",
    "categorize",
    "is_blank",
    "is_eol",
    "is_horizontal_blank",
    "is_punctuation",
    "is_word",
    "word_predicate",
]
