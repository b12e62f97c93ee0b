from pathlib import Path

import pytest

from cyclo.services import line_counter


C_SOURCE = """\
int max(int a, int b) {
    if (a > b && a != 0) {
        return a;
    }
    while (a || b || 0) {
        break;
    }
    return b;
}
"""

PY_SOURCE = """\
def check(x):
    # if this is a comment
    if x and not x.empty:
        return True
"""


class FakeLineStatistics:
    """Counts non-blank lines; never needs lizard."""

    def __init__(self):
        self.calls = []

    def get_code_lines(self, path, language):
        self.calls.append((path, language))
        with open(path, encoding="utf-8") as f:
            return sum(1 for line in f if line.strip())


@pytest.fixture
def fake_stats(monkeypatch) -> FakeLineStatistics:
    stats = FakeLineStatistics()
    monkeypatch.setattr(line_counter, "get_line_statistics", lambda: stats)
    return stats


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    proj/
      a.c
      notes.txt
      x.xyz
      .hidden.py
      .git/config.py
      sub/b.py
    """
    root = tmp_path / "proj"
    (root / "sub").mkdir(parents=True)
    (root / ".git").mkdir()

    (root / "a.c").write_text(C_SOURCE, encoding="utf-8")
    (root / "sub" / "b.py").write_text(PY_SOURCE, encoding="utf-8")
    (root / "notes.txt").write_text("if for while\n", encoding="utf-8")
    (root / "x.xyz").write_text("if (a && b)\n", encoding="utf-8")
    (root / ".hidden.py").write_text("if x:\n    pass\n", encoding="utf-8")
    (root / ".git" / "config.py").write_text("if x:\n    pass\n", encoding="utf-8")
    return root
