"""
Scenarios against the real sandbox and toolchains; skipped where they are missing.
"""

import os
import shutil

import pytest

from execution import execute_code
from execution.models import Language, Status


def requires(*programs):
    missing = [p for p in programs if shutil.which(p) is None]
    return pytest.mark.skipif(bool(missing), reason=f"not on PATH: {', '.join(missing)}")


@requires("firejail", "python3")
def test_python_hello(scratch_dir):
    outcome = execute_code(Language.PYTHON3, 'print("hi")', "", 5)

    assert outcome.status == Status.OK
    assert outcome.message == "hi\n"
    assert os.listdir(scratch_dir) == []


@requires("firejail", "gcc")
def test_c_missing_semicolon(scratch_dir):
    source = '#include <stdio.h>\nint main() { printf("x") return 0; }\n'

    outcome = execute_code(Language.C, source, "", 5)

    assert outcome.status == Status.COMPILE_TIME_ERROR
    assert "error" in outcome.message
    assert os.listdir(scratch_dir) == []


@requires("firejail", "gcc")
def test_c_reads_stdin(scratch_dir):
    source = (
        '#include <stdio.h>\n'
        'int main() { int a, b; scanf("%d %d", &a, &b); printf("%d\\n", a + b); return 0; }\n'
    )

    outcome = execute_code(Language.C, source, "2 3\n", 5)

    assert outcome.status == Status.OK
    assert outcome.message == "5\n"
    assert os.listdir(scratch_dir) == []


@requires("firejail", "python3")
def test_python_infinite_loop_hits_cpu_limit(scratch_dir):
    outcome = execute_code(Language.PYTHON3, "while True:\n    pass\n", "", 1)

    assert outcome.status == Status.RUNTIME_ERROR
    assert os.listdir(scratch_dir) == []
