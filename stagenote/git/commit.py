"""Commit creation from a formatted commit message.

Contains:
- build_commit_args: argv for git commit
- format_commit_command: the equivalent shell command, for display
- create_commit: run git commit once with the message
"""

import subprocess

from stagenote.formatters import CommitMessage
from stagenote.git.exceptions import CommitFailedError


def _escape_quotes(text: str) -> str:
    """Escape literal double quotes for embedding in a double-quoted argument."""
    return text.replace('"', '\\"')


def build_commit_args(message: CommitMessage) -> list[str]:
    """Build the git commit argv for a message.

    The body is passed as a second ``-m`` only when it is non-empty.
    """
    args = ["git", "commit", "-m", message.header]
    if message.has_body:
        args += ["-m", message.body]
    return args


def format_commit_command(message: CommitMessage) -> str:
    """Render the commit command as it would be typed in a shell.

    Args:
        message: The commit message.

    Returns:
        A single-line command with double quotes escaped.
    """
    command = f'git commit -m "{_escape_quotes(message.header)}"'
    if message.has_body:
        command += f' -m "{_escape_quotes(message.body)}"'
    return command


def create_commit(message: CommitMessage) -> str:
    """Create a commit with the given message.

    Arguments are passed to git directly (no shell), so quotes in the
    message reach git unchanged.

    Args:
        message: The commit message.

    Returns:
        The stdout of git commit.

    Raises:
        CommitFailedError: If git commit exits non-zero or git is missing.
    """
    try:
        result = subprocess.run(
            build_commit_args(message),
            capture_output=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise CommitFailedError("Git is not installed or not in PATH.")

    if result.returncode != 0:
        details = (result.stderr or result.stdout or "").strip()
        raise CommitFailedError(f"Error creating git commit.\n{details}".rstrip())

    return result.stdout
