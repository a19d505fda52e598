"""
Compile step
"""

import logging

from .languages import LanguageSpec
from .models import CompileResult, Status
from .result import classify_compile
from .sandbox import build_compile_command, run_sandboxed
from .workspace import Workspace, destroy

logger = logging.getLogger(__name__)


def compile_source(spec: LanguageSpec, ws: Workspace) -> CompileResult:
    """
    Compile the workspace's source file inside the sandbox

    Interpreted languages skip compilation and get the interpreter with the
    source path as its only argument. For compiled languages the source file
    is removed once the compiler exits, and any output on the compiler's
    stderr fails the build.

    Args:
        spec: Language of the submission
        ws: Workspace holding the staged source file

    Returns:
        CompileResult; on CompileTimeError there is no executable
    """
    executable = spec.run_command(ws.source_path, ws.binary_path)
    if not spec.is_compiled:
        return CompileResult(status=Status.OK, executable=executable)

    # Owned by the workspace from here on, whether or not the build succeeds
    ws.track(ws.binary_path)

    command = build_compile_command(spec.compile_command(ws.source_path, ws.binary_path))
    try:
        return_code, _, stderr = run_sandboxed(command)
    finally:
        destroy(ws.source_path)

    result = classify_compile(executable, stderr)
    if result.status == Status.COMPILE_TIME_ERROR:
        logger.info(f"{spec.language.value} compilation failed (exit code {return_code})")
        destroy(ws.binary_path)
    else:
        logger.info(f"{spec.language.value} compilation succeeded")
    return result
