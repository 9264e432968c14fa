from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest


@pytest.mark.integration
# What this tests
# - With only src/ on sys.path, the public `api` package imports in a fresh interpreter
#   without pulling in the window/GL stack. Runs in a subprocess to keep sys.modules clean.
def test_src_layout_imports_without_window_stack():
    repo_root = Path(__file__).resolve().parents[2]
    src_dir = repo_root / "src"

    script = (
        "import sys, importlib\n"
        "from pathlib import Path\n"
        f"src = Path(r'{str(src_dir)}')\n"
        f"repo = Path(r'{str(repo_root)}')\n"
        "sys.path[:] = [str(src)] + [p for p in sys.path if Path(p).resolve() != repo.resolve()]\n"
        "m = importlib.import_module('api')\n"
        "assert hasattr(m, 'Turtle') and hasattr(m, 'Screen') and hasattr(m, 'run')\n"
        "assert 'pyglet' not in sys.modules and 'moderngl' not in sys.modules\n"
    )

    proc = subprocess.run([sys.executable, "-c", script], capture_output=True, text=True)
    assert proc.returncode == 0, proc.stderr
