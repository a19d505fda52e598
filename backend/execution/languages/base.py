"""
Shape shared by every registered language
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from ..models import Executable, Language

CompileCommand = Callable[[str, str], List[str]]


@dataclass(frozen=True)
class LanguageSpec:
    """
    How one language is staged, built and launched

    Attributes:
        language: The tag this entry answers to
        extension: Source file extension, without the dot
        compile_command: Builds the compiler argv from (source_path, output_path);
            None for interpreted languages
        interpreter: Interpreter program for interpreted languages
    """
    language: Language
    extension: str
    compile_command: Optional[CompileCommand] = None
    interpreter: Optional[str] = None

    @property
    def is_compiled(self) -> bool:
        return self.compile_command is not None

    def run_command(self, source_path: str, binary_path: str) -> Executable:
        """
        Describe what the sandbox should launch

        Args:
            source_path: Path of the staged source file
            binary_path: Path the compiler wrote the program to

        Returns:
            Executable for the run step
        """
        if self.is_compiled:
            return Executable(program=binary_path)
        return Executable(program=self.interpreter, args=[source_path])
