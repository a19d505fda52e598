"""
C++ language support
"""

from typing import List

from ..models import Language
from .base import LanguageSpec


def compile_cpp(source_path: str, output_path: str) -> List[str]:
    return ['g++', '-o', output_path, source_path]


CPP = LanguageSpec(language=Language.CPP, extension='cpp', compile_command=compile_cpp)
