"""
Go language support
"""

from typing import List

from ..models import Language
from .base import LanguageSpec


def compile_go(source_path: str, output_path: str) -> List[str]:
    """
    Build a single-file Go program

    `go build` would name the binary after the file stem anyway; passing -o
    keeps the output path explicit like the other toolchains.
    """
    return ['go', 'build', '-o', output_path, source_path]


GO = LanguageSpec(language=Language.GO, extension='go', compile_command=compile_go)
