"""
Shared fixtures: small JS/TS projects written under tmp_path.
"""

from pathlib import Path
from typing import Callable, Dict

import pytest


@pytest.fixture
def make_project(tmp_path) -> Callable[[Dict[str, str]], Path]:
    """Write {relative path: content} under tmp_path and return the root."""

    def _make(files: Dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return tmp_path

    return _make


@pytest.fixture
def five_file_project(make_project) -> Path:
    """
    a -> b, e
    b -> c, d, e
    c, d, e import nothing.
    """
    return make_project({
        "a.ts": 'import { b } from "./b";\nimport { e } from "./e";\n',
        "b.ts": 'import "./c";\nexport * from "./d";\nconst e = require("./e");\n',
        "c.ts": "export const c = 1;\n",
        "d.ts": "export const d = 2;\n",
        "e.ts": "export const e = 3;\n",
    })
