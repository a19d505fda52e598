"""
Run step
"""

import logging
from typing import Tuple

from .models import Executable, Status
from .result import classify_run
from .sandbox import build_run_command, run_sandboxed

logger = logging.getLogger(__name__)


def run(executable: Executable, input_text: str, cpu_time_limit: int) -> Tuple[Status, str]:
    """
    Run a compiled program or interpreter in the locked-down run profile

    Args:
        executable: Program and arguments from the compile step
        input_text: Text for the program's stdin (not written when empty)
        cpu_time_limit: CPU-seconds before the sandbox kills the program

    Returns:
        Tuple of (status, message): stderr on RuntimeError, stdout on Ok
    """
    command = build_run_command(executable, cpu_time_limit)
    return_code, stdout, stderr = run_sandboxed(command, input_text=input_text)
    status, message = classify_run(return_code, stdout, stderr)
    logger.info(f"Run finished with {status.value} (exit code {return_code})")
    return status, message
