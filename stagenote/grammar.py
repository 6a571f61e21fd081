"""Tokens recognized in free-text model output.

Two small, closed vocabularies drive the response parser:
- LABEL_TOKENS: role labels a model may prefix a line with ("Header:", "Body:")
- CHANGE_TYPES: conventional-commit types that mark the start of a header
"""

import re

LABEL_TOKENS = (
    "header",
    "body",
    "title",
    "subject",
    "description",
    "summary",
    "commit message",
    "message",
    "commit",
    "line 1",
    "line 2",
    "first line",
    "second line",
)

CHANGE_TYPES = (
    "feat",
    "fix",
    "refactor",
    "perf",
    "chore",
    "docs",
    "test",
    "style",
    "build",
    "ci",
    "revert",
)


def _token_pattern(token: str) -> str:
    return r"[ \t]+".join(re.escape(word) for word in token.split())


# Longest first so "commit message" wins over "commit"
_LABEL_ALTERNATION = "|".join(
    _token_pattern(token) for token in sorted(LABEL_TOKENS, key=len, reverse=True)
)

# One or more "Label:" prefixes, optionally wrapped in emphasis ("**Header:**")
LABEL_PREFIX_PATTERN = re.compile(
    rf"^[ \t]*(?:[*_]*(?:{_LABEL_ALTERNATION})[*_]*[ \t]*:[*_]*[ \t]*)+",
    re.IGNORECASE | re.MULTILINE,
)

HEADER_LINE_PATTERN = re.compile(
    rf"^(?:{'|'.join(CHANGE_TYPES)})(?:\([^)\n]*\))?!?:[ \t]*\S"
)


def strip_labels(text: str) -> str:
    """Remove leading role labels from every line of text.

    Args:
        text: Raw model output.

    Returns:
        The text with label prefixes removed; everything else is untouched.
    """
    return LABEL_PREFIX_PATTERN.sub("", text)


def is_header_line(line: str) -> bool:
    """Check whether a line looks like a conventional-commit header.

    Matches ``type: description``, ``type(scope): description`` and the
    breaking-change form ``type(scope)!: description`` for the known types.
    """
    return bool(HEADER_LINE_PATTERN.match(line.strip()))
