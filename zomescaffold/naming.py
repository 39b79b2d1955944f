"""Identifier case conversion, English pluralization and the package's errors."""

from __future__ import annotations

import re
from enum import Enum

__all__ = [
    "ScaffoldError",
    "InvalidArgumentsError",
    "InvalidExampleTypeError",
    "InvalidCaseError",
    "Case",
    "to_case",
    "check_case",
    "pluralize",
]


class ScaffoldError(Exception):
    """Base class for every error raised while scaffolding."""


class InvalidArgumentsError(ScaffoldError, ValueError):
    """An argument given to the scaffolder is not valid."""


class InvalidExampleTypeError(ScaffoldError, ValueError):
    """An example name is not one of the known examples."""

    def __init__(self, value: str, allowed: str) -> None:
        super().__init__(f"Invalid example type: {value}. Allowed types: {allowed}")
        self.value = value
        self.allowed = allowed


class InvalidCaseError(ScaffoldError, ValueError):
    """A string is not written in the case it is required to be in."""

    def __init__(self, text: str, identifier: str, case: "Case") -> None:
        super().__init__(f"{identifier} must be {case.value} case, got {text!r}")
        self.text = text
        self.identifier = identifier
        self.case = case


class Case(Enum):
    """Identifier case styles."""

    SNAKE = "snake"
    UPPER_SNAKE = "upper_snake"
    KEBAB = "kebab"
    PASCAL = "pascal"
    CAMEL = "camel"
    TITLE = "title"

    def __str__(self) -> str:
        return self.value


_SEPARATORS = re.compile(r"[\s_\-]+")
_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def _words(text: str) -> list[str]:
    return [word for chunk in _SEPARATORS.split(text) for word in _WORD.findall(chunk)]


def to_case(text: str, case: Case) -> str:
    """Split ``text`` into words and join them again in ``case``."""
    words = _words(text)
    if case is Case.SNAKE:
        return "_".join(w.lower() for w in words)
    if case is Case.UPPER_SNAKE:
        return "_".join(w.upper() for w in words)
    if case is Case.KEBAB:
        return "-".join(w.lower() for w in words)
    if case is Case.PASCAL:
        return "".join(w.capitalize() for w in words)
    if case is Case.CAMEL:
        if not words:
            return ""
        return words[0].lower() + "".join(w.capitalize() for w in words[1:])
    return " ".join(w.capitalize() for w in words)


def check_case(text: str, identifier: str, case: Case) -> None:
    """Raise InvalidCaseError unless ``text`` is already written in ``case``."""
    if to_case(text, case) != text:
        raise InvalidCaseError(text, identifier, case)


_UNCOUNTABLE = frozenset(
    {
        "sheep", "fish", "deer", "moose", "bison", "series", "species", "news",
        "information", "rice", "equipment", "money", "police",
    }
)

_IRREGULAR = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "tooth": "teeth",
    "foot": "feet",
    "mouse": "mice",
    "goose": "geese",
    "ox": "oxen",
}
_IRREGULAR_PLURALS = {plural: single for single, plural in _IRREGULAR.items()}


def _rules(pairs: list[tuple[str, str]]) -> list[tuple[re.Pattern[str], str]]:
    return [(re.compile(pattern, re.IGNORECASE), repl) for pattern, repl in pairs]


_PLURAL_RULES = _rules(
    [
        (r"(quiz)$", r"\1zes"),
        (r"(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
        (r"(alias|status|bus|campus|virus)$", r"\1es"),
        (r"(x|ch|ss|sh|zz)$", r"\1es"),
        (r"([^aeiouy]|qu)y$", r"\1ies"),
        (r"(hive)$", r"\1s"),
        (r"([^f])fe$", r"\1ves"),
        (r"([lr])f$", r"\1ves"),
        (r"sis$", "ses"),
        (r"([ti])um$", r"\1a"),
        (r"(buffal|tomat|potat|her|ech)o$", r"\1oes"),
        (r"s$", "s"),
        (r"$", "s"),
    ]
)

_SINGULAR_RULES = _rules(
    [
        (r"(quiz)zes$", r"\1"),
        (r"(matr)ices$", r"\1ix"),
        (r"(vert|ind)ices$", r"\1ex"),
        (r"(alias|status|bus|campus|virus)es$", r"\1"),
        (r"(x|ch|ss|sh|zz)es$", r"\1"),
        (r"([^aeiouy]|qu)ies$", r"\1y"),
        (r"(hive)s$", r"\1"),
        (r"([lr])ves$", r"\1f"),
        (r"([^f])ves$", r"\1fe"),
        (r"(analy|ba|diagno|parenthe|progno|synop|the|cri)ses$", r"\1sis"),
        (r"([ti])a$", r"\1um"),
        (r"(buffal|tomat|potat|her|ech)oes$", r"\1o"),
        (r"(ss|us|is)$", r"\1"),
        (r"s$", ""),
    ]
)


def _apply(word: str, rules: list[tuple[re.Pattern[str], str]]) -> str:
    for pattern, repl in rules:
        match = pattern.search(word)
        if match:
            result = word[: match.start()] + match.expand(repl)
            return result.upper() if word.isupper() else result
    return word


def _restore_case(original: str, result: str) -> str:
    if original.isupper() and len(original) > 1:
        return result.upper()
    if original[:1].isupper():
        return result[:1].upper() + result[1:]
    return result


def _singular(word: str) -> str:
    lower = word.lower()
    if lower in _UNCOUNTABLE or lower in _IRREGULAR:
        return word
    if lower in _IRREGULAR_PLURALS:
        return _restore_case(word, _IRREGULAR_PLURALS[lower])
    return _apply(word, _SINGULAR_RULES)


def _plural(word: str) -> str:
    lower = word.lower()
    if lower in _UNCOUNTABLE or lower in _IRREGULAR_PLURALS:
        return word
    if lower in _IRREGULAR:
        return _restore_case(word, _IRREGULAR[lower])
    single = _singular(word)
    if single != word and _apply(single, _PLURAL_RULES).lower() == lower:
        return word
    return _apply(word, _PLURAL_RULES)


def pluralize(word: str, count: int) -> str:
    """Return ``word`` in the singular when ``count`` is 1, otherwise in the plural."""
    if not word:
        return word
    return _singular(word) if count == 1 else _plural(word)