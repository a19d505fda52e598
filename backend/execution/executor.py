"""
Main executor: one request through compile and run
"""

import logging

from .compiler import compile_source
from .languages import get_language_spec
from .models import ExecutionOutcome, Language, Status
from .runner import run
from .workspace import Workspace

logger = logging.getLogger(__name__)


def execute_code(
    language: Language,
    source_code: str,
    input_text: str,
    time_limit: int
) -> ExecutionOutcome:
    """
    Compile (if needed) and run a submission, leaving nothing in the scratch directory

    Inputs are expected to be validated already: language from the closed set,
    time_limit within 1..10 seconds.

    Args:
        language: Language of the submission
        source_code: Program source
        input_text: Text fed to the program's stdin
        time_limit: CPU-seconds allowed for the run

    Returns:
        ExecutionOutcome with compiler diagnostics, stderr or stdout as message

    Raises:
        ExecutionEnvironmentError: If the source cannot be staged or a sandbox
            process cannot be launched
    """
    spec = get_language_spec(language)
    logger.info(f"Executing {language.value} code (time limit {time_limit}s)")

    with Workspace(spec, source_code) as ws:
        compiled = compile_source(spec, ws)
        if compiled.status == Status.COMPILE_TIME_ERROR:
            return ExecutionOutcome(status=compiled.status, message=compiled.diagnostics)

        status, message = run(compiled.executable, input_text, time_limit)
        return ExecutionOutcome(status=status, message=message)
