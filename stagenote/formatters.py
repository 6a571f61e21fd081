"""Commit message parsing and formatting.

Turns unstructured model output into a structured header/body message:
- CommitMessage: validated header/body pair
- clean_markdown: strip markdown artifacts from text
- normalize_header: drop stray symbols before the first letter
- format_commit_message: parse raw model output into a CommitMessage
"""

import logging
import re

from pydantic import BaseModel, ConfigDict, field_validator

from stagenote.grammar import is_header_line, strip_labels

logger = logging.getLogger(__name__)

FALLBACK_HEADER = "chore: update changes"
FALLBACK_BODY = "Apply various code improvements and updates"


class CommitMessage(BaseModel):
    """Pydantic model for a two-part commit message.

    Attributes:
        header: The short first line, e.g. ``feat(auth): add token refresh``.
        body: Optional explanatory text. Empty means header-only commit.
    """

    model_config = ConfigDict(frozen=True)

    header: str
    body: str = ""

    @field_validator("header")
    @classmethod
    def header_must_not_be_empty(cls, v: str) -> str:
        """Ensure header is not empty."""
        if not v or not v.strip():
            raise ValueError("Header cannot be empty")
        return v.strip()

    @field_validator("body")
    @classmethod
    def strip_body(cls, v: str) -> str:
        return v.strip()

    @property
    def has_body(self) -> bool:
        return bool(self.body)

    def render(self) -> str:
        """Render the message as git stores it: header, blank line, body."""
        if self.has_body:
            return f"{self.header}\n\n{self.body}"
        return self.header


def fallback_message() -> CommitMessage:
    """The generic message used when the model returns nothing usable."""
    return CommitMessage(header=FALLBACK_HEADER, body=FALLBACK_BODY)


_FENCE_LINE = re.compile(r"^[ \t]*`{3,}[\w+.#-]*[ \t]*$\n?", re.MULTILINE)
_FENCE = re.compile(r"`{3,}")
_INLINE_CODE = re.compile(r"`([^`\n]+)`")
_BOLD = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC = re.compile(r"\*([^*\n]+)\*")
_LINK = re.compile(r"\[([^\]]+)\]\([^)]*\)")
_HEADING = re.compile(r"^[ \t]*#+[ \t]*", re.MULTILINE)
_EXTRA_NEWLINES = re.compile(r"\n{3,}")
_LEADING_NON_LETTERS = re.compile(r"^[\W\d_]+")
_TRAILING_EMPHASIS = re.compile(r"\*+$")
_FENCE_ONLY_LINE = re.compile(r"^[ \t]*`{3,}[\w+.#-]*[ \t]*$")


def _clean_markdown_once(text: str) -> str:
    text = _FENCE_LINE.sub("", text)
    text = _FENCE.sub("", text)
    text = _INLINE_CODE.sub(r"\1", text)
    text = text.replace("`", "")
    text = _BOLD.sub(r"\1", text)
    text = _ITALIC.sub(r"\1", text)
    text = _LINK.sub(r"\1", text)
    text = _HEADING.sub("", text)
    text = _EXTRA_NEWLINES.sub("\n\n", text)
    return text.strip()


def clean_markdown(text: str) -> str:
    """Strip markdown formatting from text.

    Removes code fences, inline code backticks, bold and italic markers,
    link targets (keeping the link text) and heading markers, collapses
    runs of blank lines and trims the result.

    Every pass only removes characters, so passes are repeated until the
    text stops changing. This makes the function idempotent even when
    removing one construct exposes another.

    Args:
        text: Text possibly containing markdown.

    Returns:
        The cleaned text.
    """
    cleaned = _clean_markdown_once(text)
    while cleaned != text:
        text = cleaned
        cleaned = _clean_markdown_once(text)
    return cleaned


def normalize_header(header: str) -> str:
    """Remove any non-letter characters preceding the first letter.

    ``"- feat: x"`` and ``"1. feat: x"`` both become ``"feat: x"``. Unpaired
    emphasis markers left at the end of the header are dropped as well.
    """
    header = _LEADING_NON_LETTERS.sub("", header)
    return _TRAILING_EMPHASIS.sub("", header.rstrip()).rstrip()


def _content_lines(text: str) -> list[str]:
    """Split text into lines, dropping blank lines and bare code fences."""
    return [
        line.strip()
        for line in text.split("\n")
        if line.strip() and not _FENCE_ONLY_LINE.match(line)
    ]


def format_commit_message(raw_text: str) -> CommitMessage:
    """Parse raw model output into a commit message.

    The first line that survives cleanup becomes the header. Following
    lines are joined with spaces into the body, stopping early at any line
    that itself looks like a conventional-commit header, since that is the
    model starting a second message rather than explaining the first.

    Args:
        raw_text: Untrusted text returned by the model.

    Returns:
        A CommitMessage. Never raises: output with no usable content yields
        the fallback message and a logged warning.
    """
    lines = _content_lines(strip_labels((raw_text or "").strip()))

    header = ""
    remaining: list[str] = []
    for index, line in enumerate(lines):
        header = normalize_header(clean_markdown(line))
        if header:
            remaining = lines[index + 1:]
            break

    if not header:
        logger.warning(
            "Model response had no usable content; using fallback commit message"
        )
        return fallback_message()

    body_lines = []
    for line in remaining:
        if is_header_line(clean_markdown(line)):
            logger.debug("Body truncated at header-like line: %r", line)
            break
        body_lines.append(line)

    body = clean_markdown(" ".join(body_lines))
    return CommitMessage(header=header, body=body)
