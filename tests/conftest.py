"""Shared test fixtures — captured git output, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path
from typing import List

import pytest


def lines(text: str) -> List[str]:
    return textwrap.dedent(text).splitlines()


@pytest.fixture
def status_clean() -> List[str]:
    """Status of a clean working tree."""
    return lines("""\
        # On branch master
        nothing to commit (working directory clean)
    """)


@pytest.fixture
def status_staged_and_untracked() -> List[str]:
    """Two new staged files plus two untracked files."""
    return lines("""\
        # On branch master
        # Changes to be committed:
        #   (use "git reset HEAD <file>..." to unstage)
        #
        # new file:   dir/fileD
        # new file:   fileA
        #
        # Untracked files:
        #   (use "git add <file>..." to include in what will be committed)
        #
        # fileB
        # fileC
    """)


@pytest.fixture
def status_all_sections() -> List[str]:
    """Staged, unstaged and untracked entries, old-style headers."""
    return lines("""\
        # On branch master
        # Changes to be committed:
        #   (use "git reset HEAD <file>..." to unstage)
        #
        #       modified:   src/Modified.java
        #       deleted:    src/Removed.java
        #       new file:   src/Added File.java
        #
        # Changed but not updated:
        #   (use "git add <file>..." to update what will be committed)
        #
        #       modified:   src/ModifiedNotStaged.java
        #       deleted:    src/RemovedNotStaged.java
        #
        # Untracked files:
        #   (use "git add <file>..." to include in what will be committed)
        #
        #       .classpath
        #       bin/
    """)


@pytest.fixture
def status_modern() -> List[str]:
    """Current git with status.displayCommentPrefix=true (tabs, new header)."""
    return [
        "# On branch main",
        "# Your branch is up to date with 'origin/main'.",
        "#",
        "# Changes not staged for commit:",
        '#   (use "git add <file>..." to update what will be committed)',
        '#   (use "git restore <file>..." to discard changes in working directory)',
        "#\tmodified:   README.md",
        "#",
        "# Untracked files:",
        '#   (use "git add <file>..." to include in what will be committed)',
        "#\tnotes/",
        "#",
        'no changes added to commit (use "git add" and/or "git commit -a")',
    ]


@pytest.fixture
def commit_output() -> List[str]:
    return lines("""\
        Created commit deadbee: fix bug
         2 files changed, 3 insertions(+), 1 deletions(-)
         create mode 100644 a/new.txt
    """)


@pytest.fixture
def commit_output_full() -> List[str]:
    """Every kind of entry line git commit prints."""
    return [
        "Created initial commit 1a2b3c4: import project",
        " 6 files changed, 120 insertions(+), 7 deletions(-)",
        " create mode 100755 bin/run.sh",
        " create mode 100644 docs/read me.txt",
        " delete mode 100644 old.txt",
        " copy src/{util.py => helpers.py} (82%)",
        " rename old/{a.txt => b.txt} (100%)",
        " rename setup.cfg => config/setup.cfg (96%)",
    ]


@pytest.fixture
def commit_output_modern() -> List[str]:
    """Current git summary line and singular statistics."""
    return [
        "[main 3f2e1d0] Add greeting",
        " 1 file changed, 1 insertion(+)",
        " create mode 100644 hello.txt",
    ]


@pytest.fixture
def checkout_files() -> List[str]:
    return [
        "M foobar01",
        "M foobar05",
        "M foobar06",
        "A foobar02",
        "A foobar07",
        "D foobar03",
    ]


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
