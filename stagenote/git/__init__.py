"""Git collaborators for stagenote.

This package provides:
- exceptions: GitError, NoStagedFilesError, NoDiffError, CommitFailedError
- runner: _run_git_command
- status: list_staged_files
- diff: get_staged_diff
- commit: build_commit_args, format_commit_command, create_commit
"""

from stagenote.git.exceptions import (
    CommitFailedError,
    GitError,
    NoDiffError,
    NoStagedFilesError,
)
from stagenote.git.runner import _run_git_command
from stagenote.git.status import list_staged_files
from stagenote.git.diff import get_staged_diff
from stagenote.git.commit import (
    build_commit_args,
    create_commit,
    format_commit_command,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedFilesError",
    "NoDiffError",
    "CommitFailedError",
    # Runner
    "_run_git_command",
    # Status
    "list_staged_files",
    # Diff
    "get_staged_diff",
    # Commit
    "build_commit_args",
    "create_commit",
    "format_commit_command",
]
