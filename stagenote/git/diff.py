"""Staged diff retrieval."""

from stagenote.config import DEFAULT_MAX_DIFF_CHARS
from stagenote.git.exceptions import GitError, NoDiffError
from stagenote.git.runner import _run_git_command

TRUNCATION_MARKER = "\n...[truncated]\n"


def get_staged_diff(max_chars: int = DEFAULT_MAX_DIFF_CHARS) -> str:
    """Get the staged diff, truncating if necessary.

    Args:
        max_chars: Maximum characters for the diff output.

    Returns:
        The staged diff string.

    Raises:
        NoDiffError: If the diff is empty or git fails to produce it.
    """
    try:
        diff = _run_git_command(["diff", "--cached"], strip=False)
    except GitError as e:
        raise NoDiffError(f"Error getting git diff.\n{e}")

    if not diff.strip():
        raise NoDiffError("No staged changes to commit.")

    if len(diff) > max_chars:
        diff = diff[:max_chars] + TRUNCATION_MARKER

    return diff
