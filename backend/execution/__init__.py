"""
Code execution module: compile and run untrusted submissions in a sandbox
"""

from .errors import ExecutionEnvironmentError, SandboxLaunchError, WorkspaceError
from .executor import execute_code
from .languages import parse_language
from .models import ExecutionOutcome, Language, Status
from .workspace import ensure_scratch_dir

__all__ = [
    'execute_code',
    'ensure_scratch_dir',
    'parse_language',
    'ExecutionOutcome',
    'Language',
    'Status',
    'ExecutionEnvironmentError',
    'SandboxLaunchError',
    'WorkspaceError',
]
