from __future__ import annotations

from enum import Enum

from .errors import InvalidInputError
from .logger import logger

WORD_DELIMITERS = frozenset("_-")
DOT = "."


class CharClass(str, Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    CASELESS = "caseless"
    SEPARATOR = "separator"


def classify(ch: str) -> CharClass:
    if ch.isdigit():
        return CharClass.DIGIT
    if ch.isupper():
        return CharClass.UPPER
    if ch.islower():
        return CharClass.LOWER
    if ch.isalpha():
        return CharClass.CASELESS
    return CharClass.SEPARATOR


def ensure_text(value: object) -> str:
    """Return ``value`` stripped of surrounding whitespace, or raise if it is not a str."""
    if not isinstance(value, str):
        logger.debug("Rejecting input of type %s", type(value).__name__)
        raise InvalidInputError(value)
    return value.strip()


def is_delimiter(ch: str, *, split_on_dot: bool = False) -> bool:
    if ch in WORD_DELIMITERS or ch.isspace():
        return True
    return split_on_dot and ch == DOT


def has_delimiter(text: str, *, split_on_dot: bool = False) -> bool:
    return any(is_delimiter(ch, split_on_dot=split_on_dot) for ch in text)


def is_upper_code(text: str) -> bool:
    """True for acronyms and codes such as ``HTTP`` or ``ID42``."""
    return bool(text) and all(
        classify(ch) in (CharClass.UPPER, CharClass.DIGIT) for ch in text
    )


def _split_separators(text: str) -> list[str]:
    words: list[str] = []
    current: list[str] = []
    for ch in text:
        if classify(ch) is CharClass.SEPARATOR:
            if current:
                words.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        words.append("".join(current))
    return words


def _split_case_boundaries(text: str) -> list[str]:
    """
    Scan ``text`` once, opening a new word:

    - before an upper-case letter that follows a lower-case letter or digit
      (``userId`` -> ``user`` | ``Id``);
    - before the last letter of an upper-case run when a lower-case letter
      comes next (``XMLHttp`` -> ``XML`` | ``Http``).

    Any separator character closes the current word. Digits and caseless
    letters never open a word by themselves.
    """
    words: list[str] = []
    current: list[str] = []
    prev = CharClass.SEPARATOR
    for i, ch in enumerate(text):
        cls = classify(ch)
        if cls is CharClass.SEPARATOR:
            if current:
                words.append("".join(current))
                current = []
            prev = cls
            continue
        if cls is CharClass.UPPER and current:
            if prev in (CharClass.LOWER, CharClass.DIGIT):
                boundary = True
            elif prev is CharClass.UPPER:
                nxt = text[i + 1] if i + 1 < len(text) else ""
                boundary = bool(nxt) and classify(nxt) is CharClass.LOWER
            else:
                boundary = False
            if boundary:
                words.append("".join(current))
                current = []
        current.append(ch)
        prev = cls
    if current:
        words.append("".join(current))
    return words


def _lower_word(word: str) -> str:
    # lower() may emit combining marks ("İ" -> "i" + U+0307); keep letters and digits only
    return "".join(
        ch for ch in word.lower() if classify(ch) is not CharClass.SEPARATOR
    )


def split_words(text: str, *, split_on_dot: bool = False) -> list[str]:
    """
    Split already validated and trimmed ``text`` into lowercase word segments.

    Strategies, first match wins:
      1. explicit delimiters (``_``, ``-``, whitespace, plus ``.`` when
         ``split_on_dot``) -> split on them only, no case splitting
      2. only upper-case letters and digits -> one segment
      3. otherwise split on case transitions (a lone word stays whole)
    """
    if not text:
        return []
    if has_delimiter(text, split_on_dot=split_on_dot):
        logger.trace("Splitting %r on delimiters", text)
        words = _split_separators(text)
    elif is_upper_code(text):
        logger.trace("Keeping upper-case code %r whole", text)
        words = [text]
    else:
        logger.trace("Splitting %r on case transitions", text)
        words = _split_case_boundaries(text)
    return [w for w in (_lower_word(w) for w in words) if w]


def tokenize(value: object, *, split_on_dot: bool = False) -> list[str]:
    """Validate, trim and split ``value`` in one step."""
    return split_words(ensure_text(value), split_on_dot=split_on_dot)
