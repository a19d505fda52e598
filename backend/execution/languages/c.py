"""
C language support
"""

from typing import List

from ..models import Language
from .base import LanguageSpec


def compile_c(source_path: str, output_path: str) -> List[str]:
    """gcc invocation producing output_path from source_path"""
    return ['gcc', '-o', output_path, source_path]


C = LanguageSpec(language=Language.C, extension='c', compile_command=compile_c)
