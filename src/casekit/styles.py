from __future__ import annotations

from enum import Enum
from typing import Iterable


def capitalize_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


class CaseStyle(str, Enum):
    CAMEL = "camel"
    KEBAB = "kebab"
    DOT = "dot"
    SNAKE = "snake"
    PASCAL = "pascal"

    @property
    def separator(self) -> str:
        return _SEPARATORS[self]

    @property
    def splits_on_dot(self) -> bool:
        return self is CaseStyle.DOT

    @classmethod
    def parse(cls, name: "str | CaseStyle") -> "CaseStyle":
        """
        Accept a member, its value, or a common spelling such as
        ``"kebab-case"``, ``"dot.case"``, ``"camelCase"`` or ``"SNAKE_CASE"``.
        """
        if isinstance(name, cls):
            return name
        key = "".join(ch for ch in str(name).lower() if ch.isalpha())
        if key.endswith("case") and key != "case":
            key = key[: -len("case")]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown case style: {name!r}") from None


_SEPARATORS = {
    CaseStyle.CAMEL: "",
    CaseStyle.KEBAB: "-",
    CaseStyle.DOT: ".",
    CaseStyle.SNAKE: "_",
    CaseStyle.PASCAL: "",
}


def format_words(words: Iterable[str], style: CaseStyle) -> str:
    """Join lowercase word segments according to ``style``."""
    words = [w for w in words if w]
    if not words:
        return ""
    if style is CaseStyle.CAMEL:
        first, *rest = words
        return first.lower() + "".join(capitalize_word(w) for w in rest)
    if style is CaseStyle.PASCAL:
        return "".join(capitalize_word(w) for w in words)
    return style.separator.join(w.lower() for w in words)
