from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure "src" is on sys.path for imports in tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from forestquiz.core.models import Point, Tree  # noqa: E402


@pytest.fixture
def make_tree():
    def _make(
        index: int = 0,
        *,
        feature: str = "x1",
        threshold: float = 0.5,
        left: int = 0,
        right: int = 1,
    ) -> Tree:
        return Tree(id=index, feature=feature, threshold=threshold, left_class=left, right_class=right)

    return _make


@pytest.fixture
def point() -> Point:
    return Point(x1=0.3, x2=0.9)
