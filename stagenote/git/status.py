"""Staged file listing."""

import logging

from stagenote.git.exceptions import GitError, NoStagedFilesError
from stagenote.git.runner import _run_git_command

logger = logging.getLogger(__name__)


def list_staged_files() -> list[str]:
    """Get the list of staged file paths.

    Returns:
        Staged file paths relative to the repository root.

    Raises:
        NoStagedFilesError: If nothing is staged or git cannot be queried
            (for example outside a working tree).
    """
    try:
        output = _run_git_command(["diff", "--cached", "--name-only"])
    except GitError as e:
        raise NoStagedFilesError(f"Not a git repository or no staged files.\n{e}")

    files = [line.strip() for line in output.split("\n") if line.strip()]
    if not files:
        raise NoStagedFilesError(
            "No staged files to commit. Stage your changes first with: git add <files>"
        )

    logger.debug("Found %d staged file(s)", len(files))
    return files
