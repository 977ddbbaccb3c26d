from __future__ import annotations

from pathlib import Path
from typing import Dict

import pytest

DATA_DIR = Path(__file__).parent / "data"
PROJECT_DIR = DATA_DIR / "project"
INSTALLATION_DIR = PROJECT_DIR / "node_modules" / "lascss"


@pytest.fixture()
def scenario_table() -> Dict[str, str]:
    return {
        "config-color-bg": "true",
        "color-red-500": "#ff0000",
        "variant-hover": "1",
        "breakpoint-md": "1",
    }


def make_installation(root: Path, *, meta: str | None = "", utility: str | None = "") -> Path:
    """Create ``root/node_modules/lascss/dist`` with the given stylesheets (``None`` skips a file)."""
    dist = root / "node_modules" / "lascss" / "dist"
    dist.mkdir(parents=True, exist_ok=True)
    if meta is not None:
        (dist / "meta.min.css").write_text(meta, encoding="utf-8")
    if utility is not None:
        (dist / "utility.min.css").write_text(utility, encoding="utf-8")
    return dist.parent


__all__ = ["DATA_DIR", "PROJECT_DIR", "INSTALLATION_DIR", "make_installation", "scenario_table"]
