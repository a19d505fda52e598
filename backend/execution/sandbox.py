"""
Firejail sandbox utilities for compiling and running untrusted code
"""

import logging
import os
import subprocess
from typing import List, Optional, Tuple

from . import workspace
from .errors import SandboxLaunchError
from .models import Executable

logger = logging.getLogger(__name__)

# Sandbox configuration
SANDBOX_BINARY = os.getenv('SANDBOX_BINARY', 'firejail')
COMPILE_CPU_LIMIT = int(os.getenv('COMPILE_CPU_LIMIT', '30'))

DEFAULT_SECCOMP_KEEP = (
    'getcwd,getpid,rt_sigreturn,brk,close,sched_getaffinity,dup,mmap,getuid,'
    'rt_sigaction,set_robust_list,set_tid_address,rt_sigprocmask,pread64,'
    'sysinfo,gettid,getdents64,lseek,geteuid,sigaltstack,getrandom,clone,'
    'futex,arch_prctl,fcntl,poll,readlink,access,mprotect,munmap,write,'
    'prlimit64,newfstatat,getegid,exit_group,readlinkat,ioctl,openat,read,getgid'
)
SECCOMP_KEEP = [
    name.strip()
    for name in os.getenv('SANDBOX_SECCOMP_KEEP', DEFAULT_SECCOMP_KEEP).split(',')
    if name.strip()
]

BLACKLIST_PATHS = ('/home/', '/etc/', '/boot/', '/var/')

# No network, no root, no shell: applied to every sandboxed process
BASE_FLAGS = ('--quiet', '--shell=none', '--noroot', '--net=none')


def build_compile_command(compiler_command: List[str]) -> List[str]:
    """
    Wrap a compiler invocation in the compile profile

    Args:
        compiler_command: Toolchain argv, e.g. ['gcc', '-o', out, src]

    Returns:
        Full argv starting with the sandbox binary
    """
    return [
        SANDBOX_BINARY,
        *BASE_FLAGS,
        '--private',
        f'--rlimit-cpu={COMPILE_CPU_LIMIT}',
        *compiler_command,
    ]


def build_run_command(executable: Executable, cpu_time_limit: int) -> List[str]:
    """
    Wrap a program in the run profile

    The run profile hides home directories and system configuration, caps CPU
    time and only keeps the syscalls in SECCOMP_KEEP. Memory is not limited.

    Args:
        executable: Program and arguments to launch
        cpu_time_limit: CPU-seconds before the process is killed

    Returns:
        Full argv starting with the sandbox binary
    """
    command = [SANDBOX_BINARY, *BASE_FLAGS]
    command.extend(f'--blacklist={path}' for path in BLACKLIST_PATHS)
    command.append(f'--rlimit-cpu={cpu_time_limit}')
    # TODO: add --rlimit-as once Go binaries start under an address-space cap
    command.append(f"--seccomp.keep={','.join(SECCOMP_KEEP)}")
    command.append(executable.program)
    command.extend(executable.args)
    return command


def decode_output(data: Optional[bytes]) -> str:
    if not data:
        return ''
    return data.decode('utf-8', errors='replace')


def run_sandboxed(
    command: List[str],
    input_text: str = '',
    cwd: Optional[str] = None
) -> Tuple[int, str, str]:
    """
    Spawn a sandboxed command and wait for it to finish

    Input is written to the child's stdin only when non-empty; stdin is closed
    afterwards either way. There is no wall-clock timeout: the sandbox's CPU
    limit is what ends runaway processes.

    Args:
        command: Full argv, as built by build_compile_command/build_run_command
        input_text: Text fed to the child's stdin
        cwd: Working directory (defaults to the scratch directory)

    Returns:
        Tuple of (return_code, stdout, stderr)

    Raises:
        SandboxLaunchError: If the command cannot be spawned
    """
    logger.debug(f"Sandbox command: {command}")

    try:
        process = subprocess.Popen(
            command,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=cwd or workspace.SCRATCH_DIR
        )
    except OSError as e:
        raise SandboxLaunchError(f"Failed to launch {command[0]}: {e}") from e

    with process:
        try:
            stdout, stderr = process.communicate(
                input=input_text.encode('utf-8') if input_text else None
            )
        except BaseException:
            # Never leave a sandboxed child behind
            process.kill()
            raise

    return process.returncode, decode_output(stdout), decode_output(stderr)
