"""Import-cycle regression tests."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = str(Path(__file__).resolve().parents[1] / "src")


@pytest.mark.parametrize(
    "module",
    [
        "resourcefs",
        "resourcefs.domain.location",
        "resourcefs.kernel.operations.update_resource",
        "resourcefs.services.folder_store",
        "resourcefs.infrastructure.storage.local_agent",
    ],
)
def test_module_imports_in_clean_interpreter(module):
    """Each layer should import first without relying on prior import order."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [SRC, env.get("PYTHONPATH")]))
    process = subprocess.run(
        [sys.executable, "-c", f"import {module}; print('ok')"],
        capture_output=True,
        text=True,
        check=False,
        env=env,
    )
    assert process.returncode == 0, process.stderr
    assert "ok" in process.stdout
