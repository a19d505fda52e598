"""
Pydantic models for code execution
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class Language(str, Enum):
    """Languages accepted by the runner (closed set)"""
    C = "C"
    CPP = "C++"
    GO = "Go"
    RUST = "Rust"
    PYTHON2 = "Python2"
    PYTHON3 = "Python3"


class Status(str, Enum):
    """Three-way outcome of a pipeline pass"""
    COMPILE_TIME_ERROR = "CompileTimeError"
    RUNTIME_ERROR = "RuntimeError"
    OK = "Ok"


class Executable(BaseModel):
    """What to hand to the sandbox for the run step"""
    program: str
    args: List[str] = []


class CompileResult(BaseModel):
    """Output of the compile step"""
    status: Status
    executable: Optional[Executable] = None
    diagnostics: str = ""


class ExecutionOutcome(BaseModel):
    """Final classified result of one request"""
    status: Status
    message: str
