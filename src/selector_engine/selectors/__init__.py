"""Selectors: functions mapping a selection to a new selection."""

from .context import SelectorContext
from .delimiters import find_closing, find_surrounding, select_matching, select_surrounding
from .driver import Selector, apply_selector
from .find import select_to, select_to_reverse
from .flags import WHOLE_OBJECT, MatchDirection, ObjectFlags
from .lines import (
    select_buffer,
    select_line,
    select_lines,
    select_to_first_non_blank,
    select_to_line_begin,
    select_to_line_end,
    trim_partial_lines,
)
from .objects import (
    select_argument,
    select_indent,
    select_number,
    select_paragraph,
    select_sentence,
    select_whitespaces,
)
from .patterns import MatchFlags, Regex, is_bow, is_eow
from .scan import skip_while, skip_while_reverse
from .search import MatchOutcome, find_next_match, select_all_matches, split_selections
from .unicode import CharCategory, WordType, categorize, is_word
from .words import (
    select_to_next_word,
    select_to_next_word_end,
    select_to_previous_word,
    select_word,
)

__all__ = [
    "SelectorContext",
    "Selector",
    "apply_selector",
    "ObjectFlags",
    "WHOLE_OBJECT",
    "MatchDirection",
    "WordType",
    "CharCategory",
    "categorize",
    "is_word",
    "skip_while",
    "skip_while_reverse",
    "select_to_next_word",
    "select_to_next_word_end",
    "select_to_previous_word",
    "select_word",
    "select_line",
    "select_lines",
    "select_to_line_end",
    "select_to_line_begin",
    "select_to_first_non_blank",
    "select_buffer",
    "trim_partial_lines",
    "find_closing",
    "find_surrounding",
    "select_matching",
    "select_surrounding",
    "select_number",
    "select_sentence",
    "select_paragraph",
    "select_whitespaces",
    "select_indent",
    "select_argument",
    "select_to",
    "select_to_reverse",
    "Regex",
    "MatchFlags",
    "is_bow",
    "is_eow",
    "MatchOutcome",
    "find_next_match",
    "select_all_matches",
    "split_selections",
]
