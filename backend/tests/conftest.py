import os

import pytest

from execution import compiler, runner, workspace


@pytest.fixture(autouse=True)
def scratch_dir(tmp_path, monkeypatch):
    """Point the shared scratch directory at a per-test location."""
    path = str(tmp_path / "code_runner")
    monkeypatch.setattr(workspace, "SCRATCH_DIR", path)
    os.makedirs(path)
    return path


class FakeSandbox:
    """
    Stands in for run_sandboxed: compiler invocations "build" the binary by
    touching the -o path, run invocations return a canned result.
    """

    def __init__(self):
        self.compile_stderr = ""
        self.compile_writes_binary = True
        self.run_result = (0, "", "")
        self.compile_calls = []
        self.run_calls = []

    def compile(self, command, input_text="", cwd=None):
        self.compile_calls.append(command)
        output_path = command[command.index("-o") + 1]
        source_path = command[-1]
        assert os.path.exists(source_path), "compiler ran without a source file"
        if self.compile_writes_binary:
            with open(output_path, "w") as f:
                f.write("binary")
        return (1 if self.compile_stderr else 0), "", self.compile_stderr

    def run(self, command, input_text="", cwd=None):
        self.run_calls.append((command, input_text))
        return self.run_result


@pytest.fixture
def fake_sandbox(monkeypatch):
    sandbox = FakeSandbox()
    monkeypatch.setattr(compiler, "run_sandboxed", sandbox.compile)
    monkeypatch.setattr(runner, "run_sandboxed", sandbox.run)
    return sandbox
