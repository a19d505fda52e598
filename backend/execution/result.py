"""
Outcome classification

Both steps use the same rule: anything on stderr is a failure, whatever the
exit code says. Compilers that only print warnings therefore fail the build,
and programs that log to stderr are reported as runtime errors.

A run that is killed silently by the sandbox is a runtime error too. firejail
reports such a kill as exit status 128 + N, so only the signals the sandbox
kills with (SIGXCPU, SIGKILL, SIGSYS) are read that way; any other exit code
is the program's own. A program that exits with exactly 128 + one of those
(e.g. exit 137) cannot be told apart from a real kill.
"""

import signal
from typing import Optional, Tuple

from .models import CompileResult, Executable, Status

# firejail reports a child killed by signal N as exit status 128 + N
SIGNAL_EXIT_BASE = 128
SANDBOX_KILL_SIGNALS = frozenset({signal.SIGXCPU, signal.SIGKILL, signal.SIGSYS})


def classify_compile(executable: Executable, stderr: str) -> CompileResult:
    if stderr:
        return CompileResult(status=Status.COMPILE_TIME_ERROR, diagnostics=stderr)
    return CompileResult(status=Status.OK, executable=executable)


def terminating_signal(return_code: int) -> Optional[int]:
    """Signal number that killed the process, if it was killed by one"""
    if return_code < 0:
        return -return_code
    if return_code - SIGNAL_EXIT_BASE in SANDBOX_KILL_SIGNALS:
        return return_code - SIGNAL_EXIT_BASE
    return None


def describe_signal(signum: int) -> str:
    try:
        name = signal.Signals(signum).name
    except ValueError:
        name = f"signal {signum}"
    return f"Process terminated by {name}"


def classify_run(return_code: int, stdout: str, stderr: str) -> Tuple[Status, str]:
    """
    Turn a finished run into (status, message)

    Args:
        return_code: Exit status reported by the sandbox
        stdout: Captured standard output
        stderr: Captured standard error

    Returns:
        (RuntimeError, stderr) if anything was written to stderr,
        (RuntimeError, description) if the sandbox killed the process silently
        (CPU limit, forbidden syscall), otherwise (Ok, stdout)
    """
    if stderr:
        return Status.RUNTIME_ERROR, stderr
    signum = terminating_signal(return_code)
    if signum is not None:
        return Status.RUNTIME_ERROR, describe_signal(signum)
    return Status.OK, stdout
