"""
Scratch directory and per-request workspace files
"""

import logging
import os
import tempfile
import uuid
from typing import List

from .errors import WorkspaceError
from .languages import LanguageSpec

logger = logging.getLogger(__name__)

# Shared by every request; files inside never collide because names are uuid4
SCRATCH_DIR = os.getenv(
    'CODE_RUNNER_SCRATCH_DIR',
    os.path.join(tempfile.gettempdir(), 'code_runner')
)


def ensure_scratch_dir() -> str:
    """
    Create the scratch directory if it does not exist yet

    Returns:
        Path to the scratch directory
    """
    os.makedirs(SCRATCH_DIR, exist_ok=True)
    return SCRATCH_DIR


def materialize(spec: LanguageSpec, source_code: str) -> str:
    """
    Write the submitted source to a fresh file in the scratch directory

    Args:
        spec: Language of the submission (decides the extension)
        source_code: Source text, written verbatim

    Returns:
        Path to the new source file

    Raises:
        WorkspaceError: If the file cannot be created or written
    """
    path = os.path.join(SCRATCH_DIR, f"{uuid.uuid4()}.{spec.extension}")
    created = False
    try:
        ensure_scratch_dir()
        # 'x' refuses to reuse a name, even on the off chance of a uuid clash
        with open(path, 'x', encoding='utf-8', newline='') as f:
            created = True
            f.write(source_code)
    except OSError as e:
        if created:
            destroy(path)
        raise WorkspaceError(f"Failed to write source file {path}: {e}") from e

    logger.debug(f"Materialized {spec.language.value} source at {path}")
    return path


def destroy(path: str) -> None:
    """
    Remove a workspace file; a file that is already gone is not an error

    Args:
        path: File to remove
    """
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Failed to remove workspace file {path}: {e}")


def strip_extension(path: str) -> str:
    return os.path.splitext(path)[0]


class Workspace:
    """
    Scoped ownership of every file a request leaves in the scratch directory

    The source file is created on enter; anything registered with track()
    (e.g. a compiled binary) is removed together with it on exit, whichever
    way the block is left.

    Example:
        with Workspace(spec, source_code) as ws:
            ws.track(ws.binary_path)
            ...
    """

    def __init__(self, spec: LanguageSpec, source_code: str):
        self.spec = spec
        self.source_code = source_code
        self.source_path = None
        self._artifacts: List[str] = []

    @property
    def binary_path(self) -> str:
        return strip_extension(self.source_path)

    def track(self, path: str) -> None:
        if path not in self._artifacts:
            self._artifacts.append(path)

    def __enter__(self) -> 'Workspace':
        self.source_path = materialize(self.spec, self.source_code)
        self.track(self.source_path)
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        for path in self._artifacts:
            destroy(path)
        self._artifacts.clear()
