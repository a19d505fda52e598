import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from execution import workspace
from execution.errors import WorkspaceError
from execution.languages import get_language_spec
from execution.models import Language
from execution.workspace import Workspace, destroy, ensure_scratch_dir, materialize


def test_materialize_writes_source_verbatim(scratch_dir):
    source = 'print("héllo")\r\n# trailing\n'
    path = materialize(get_language_spec(Language.PYTHON3), source)

    assert os.path.dirname(path) == scratch_dir
    assert path.endswith(".py")
    with open(path, encoding="utf-8", newline="") as f:
        assert f.read() == source


def test_concurrent_materialize_never_shares_a_path(scratch_dir):
    spec = get_language_spec(Language.C)
    with ThreadPoolExecutor(max_workers=16) as pool:
        paths = list(pool.map(lambda i: materialize(spec, f"int main(){{return {i};}}"), range(200)))

    assert len(set(paths)) == 200
    assert all(p.endswith(".c") for p in paths)
    assert len(os.listdir(scratch_dir)) == 200
    for i, path in enumerate(paths):
        with open(path, encoding="utf-8") as f:
            assert f.read() == f"int main(){{return {i};}}"


def test_materialize_creates_missing_scratch_dir(tmp_path, monkeypatch):
    missing = str(tmp_path / "not" / "yet")
    monkeypatch.setattr(workspace, "SCRATCH_DIR", missing)
    path = materialize(get_language_spec(Language.GO), "package main")
    assert os.path.isfile(path)


def test_materialize_failure_raises_workspace_error(tmp_path, monkeypatch):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    monkeypatch.setattr(workspace, "SCRATCH_DIR", str(blocker / "scratch"))

    with pytest.raises(WorkspaceError):
        materialize(get_language_spec(Language.C), "int main(){}")


def test_ensure_scratch_dir_is_idempotent(scratch_dir):
    assert ensure_scratch_dir() == scratch_dir
    assert ensure_scratch_dir() == scratch_dir
    assert os.path.isdir(scratch_dir)


def test_destroy_ignores_missing_files(scratch_dir):
    destroy(os.path.join(scratch_dir, "gone.c"))


def test_workspace_removes_tracked_files(scratch_dir):
    with Workspace(get_language_spec(Language.C), "int main(){}") as ws:
        assert os.path.isfile(ws.source_path)
        assert ws.binary_path == ws.source_path[:-len(".c")]
        with open(ws.binary_path, "w") as f:
            f.write("binary")
        ws.track(ws.binary_path)

    assert os.listdir(scratch_dir) == []


def test_workspace_cleans_up_when_block_raises(scratch_dir):
    with pytest.raises(RuntimeError):
        with Workspace(get_language_spec(Language.PYTHON3), "print(1)"):
            raise RuntimeError("boom")

    assert os.listdir(scratch_dir) == []
