from __future__ import annotations

from .convert import (
    convert,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)
from .errors import INVALID_INPUT_MESSAGE, CasekitError, InvalidInputError
from .styles import CaseStyle, format_words
from .tokens import ensure_text, split_words, tokenize

__all__ = [
    "CaseStyle",
    "CasekitError",
    "INVALID_INPUT_MESSAGE",
    "InvalidInputError",
    "convert",
    "ensure_text",
    "format_words",
    "split_words",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "tokenize",
]
