"""
Language registry
"""

from typing import Dict

from ..models import Language
from .base import LanguageSpec
from .c import C
from .cpp import CPP
from .go import GO
from .python import PYTHON2, PYTHON3
from .rust import RUST

LANGUAGES: Dict[Language, LanguageSpec] = {
    spec.language: spec
    for spec in (C, CPP, GO, RUST, PYTHON2, PYTHON3)
}


def parse_language(tag: str) -> Language:
    """
    Resolve a request's language tag

    Args:
        tag: Exact tag as sent by the client, e.g. "C++" or "Python3"

    Returns:
        The matching Language

    Raises:
        ValueError: If the tag is not one of the supported languages
    """
    try:
        return Language(tag)
    except ValueError:
        raise ValueError(f"Unsupported language: {tag}") from None


def get_language_spec(language: Language) -> LanguageSpec:
    return LANGUAGES[language]


__all__ = ['LANGUAGES', 'LanguageSpec', 'get_language_spec', 'parse_language']
