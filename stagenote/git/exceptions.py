"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NoStagedFilesError: Raised when nothing is staged
- NoDiffError: Raised when the staged diff cannot be produced
- CommitFailedError: Raised when git commit exits non-zero
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NoStagedFilesError(GitError):
    """Raised when there are no staged files."""

    pass


class NoDiffError(GitError):
    """Raised when the staged diff is empty or cannot be read."""

    pass


class CommitFailedError(GitError):
    """Raised when the commit command is rejected."""

    pass
