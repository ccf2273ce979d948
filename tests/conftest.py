"""Shared test fixtures for diff2html-cli."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_DIFF = """\
diff --git a/sample.txt b/sample.txt
index 0000001..0ddf2ba 100644
--- a/sample.txt
+++ b/sample.txt
@@ -1 +1 @@
-test
+test1
"""

MULTI_FILE_DIFF = """\
diff --git a/src/app.py b/src/app.py
index 1111111..2222222 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,4 +1,4 @@
 import os
-def main(argv):
+def main(argv, env):
     return 0
 # end
diff --git a/docs/new.md b/docs/new.md
new file mode 100644
index 0000000..3333333
--- /dev/null
+++ b/docs/new.md
@@ -0,0 +1,2 @@
+# Title
+body
diff --git a/old.cfg b/old.cfg
deleted file mode 100644
index 4444444..0000000
--- a/old.cfg
+++ /dev/null
@@ -1 +0,0 @@
-key = value
diff --git a/before.txt b/after.txt
similarity index 100%
rename from before.txt
rename to after.txt
"""


def _run_git(repo: Path, *args: str) -> None:
    """Run a git command inside the given repo."""
    subprocess.run(
        ["git", *args],
        cwd=str(repo),
        check=True,
        capture_output=True,
    )


@pytest.fixture
def sample_diff() -> str:
    """A two-line unified diff touching one file."""
    return SAMPLE_DIFF


@pytest.fixture
def multi_file_diff() -> str:
    """A diff with a modified, an added, a deleted and a renamed file."""
    return MULTI_FILE_DIFF


@pytest.fixture
def sample_diff_file(tmp_path: Path) -> Path:
    """Write SAMPLE_DIFF to sample.diff and return its path."""
    path = tmp_path / "sample.diff"
    path.write_text(SAMPLE_DIFF)
    return path


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a git repository with two commits on main.

    Layout after setup:

    HEAD~1:
        file_a.txt  -> "hello\\n"
        file_b.txt  -> "world\\n"

    HEAD:
        file_a.txt  -> "hello modified\\n"  (modified)
        file_b.txt  -> "world\\n"           (unchanged)
        file_c.txt  -> "new file\\n"        (added)

    Returns the repo root path.
    """
    repo = tmp_path / "repo"
    repo.mkdir()

    _run_git(repo, "init", "--initial-branch=main")
    _run_git(repo, "config", "user.email", "test@test.com")
    _run_git(repo, "config", "user.name", "Test")
    _run_git(repo, "config", "color.ui", "false")

    (repo / "file_a.txt").write_text("hello\n")
    (repo / "file_b.txt").write_text("world\n")
    _run_git(repo, "add", ".")
    _run_git(repo, "commit", "-m", "initial")

    (repo / "file_a.txt").write_text("hello modified\n")
    (repo / "file_c.txt").write_text("new file\n")
    _run_git(repo, "add", ".")
    _run_git(repo, "commit", "-m", "second change")

    return repo
