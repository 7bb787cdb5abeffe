from __future__ import annotations

from .styles import CaseStyle, format_words
from .tokens import CharClass, classify, ensure_text, has_delimiter, is_upper_code, split_words


def convert(value: object, style: CaseStyle | str) -> str:
    """
    Convert ``value`` to ``style``.

    Raises InvalidInputError when ``value`` is not a str and ValueError for an
    unknown style name. Blank strings convert to ``""``.
    """
    text = ensure_text(value)
    style = CaseStyle.parse(style)
    if not text:
        return ""
    return format_words(split_words(text, split_on_dot=style.splits_on_dot), style)


def _preserve_camel(text: str) -> str:
    if is_upper_code(text):
        return text.lower()
    if not all(ch.isalnum() for ch in text):
        return format_words(split_words(text), CaseStyle.CAMEL)
    head = classify(text[0])
    if head is CharClass.UPPER:
        return text[0].lower() + text[1:]
    if head is CharClass.LOWER and any(ch.isupper() for ch in text):
        return text
    return text.lower()


def to_camel_case(value: object, *, preserve_camel: bool = False) -> str:
    """
    ``"SCREEN_NAME"`` -> ``"screenName"``, ``"userID"`` -> ``"userId"``.

    With ``preserve_camel`` a delimiter-free input keeps its inner
    capitalization: ``"alreadyCamelCase"`` is returned untouched and
    ``"PascalCase"`` only loses its leading capital. Input holding other
    punctuation still goes through the tokenizer, so ``"a.b"`` gives
    ``"aB"`` rather than being lowercased as-is.
    """
    text = ensure_text(value)
    if not text:
        return ""
    if preserve_camel and not has_delimiter(text):
        return _preserve_camel(text)
    return format_words(split_words(text), CaseStyle.CAMEL)


def to_kebab_case(value: object) -> str:
    return convert(value, CaseStyle.KEBAB)


def to_dot_case(value: object) -> str:
    return convert(value, CaseStyle.DOT)


def to_snake_case(value: object) -> str:
    return convert(value, CaseStyle.SNAKE)


def to_pascal_case(value: object) -> str:
    return convert(value, CaseStyle.PASCAL)


CONVERTERS = {
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.KEBAB: to_kebab_case,
    CaseStyle.DOT: to_dot_case,
    CaseStyle.SNAKE: to_snake_case,
    CaseStyle.PASCAL: to_pascal_case,
}
