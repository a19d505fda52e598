"""
Rust language support
"""

from typing import List

from ..models import Language
from .base import LanguageSpec


def compile_rust(source_path: str, output_path: str) -> List[str]:
    # Single-file programs only, no Cargo
    return ['rustc', '-o', output_path, source_path]


RUST = LanguageSpec(language=Language.RUST, extension='rs', compile_command=compile_rust)
