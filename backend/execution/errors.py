"""
Failures of the execution environment itself.

These are operator-facing problems (missing toolchain, unwritable scratch
directory) and never end up in an ExecutionOutcome.
"""


class ExecutionEnvironmentError(Exception):
    """The host could not carry out the pipeline for this request."""
    pass


class WorkspaceError(ExecutionEnvironmentError):
    """Raised when the source file cannot be staged in the scratch directory."""
    pass


class SandboxLaunchError(ExecutionEnvironmentError):
    """Raised when the sandbox binary (or the command it wraps) cannot be spawned."""
    pass
