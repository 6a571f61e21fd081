"""Prompt template for commit message generation."""

from typing import Sequence

COMMIT_PROMPT_TEMPLATE = """Analyze the git diff and generate a conventional commit message with header and body.

Staged files: {files}

Git diff:
{diff}

Generate exactly two lines without any labels:
First line: Header in format "type(scope): description" (max 50 chars)
Second line: Body describing the purpose and impact (2-3 sentences)

STRICT RULES:
- Header MUST follow: <type>(<scope>): <description>
- Types: feat, fix, refactor, perf, chore, docs ONLY
- Scope: specific component from changed files
- Description: imperative mood, under 50 chars, what changed
- Body: 2-3 sentences MAX, specific purpose and user benefit
- NO "Line 1:", "Line 2:", "Header:", "Body:" labels
- NO generic terms like "improve", "enhance", "update", "extend"
- NO implementation details like "add function", "update imports"
- NO file names in description
- If multiple changes, focus on the main significant one

Examples:
feat(chat): add message reactions
Users can react with emojis for quick feedback without typing messages. Increases engagement in conversations.

fix(auth): resolve session expiration
Extend token lifetime from 1 to 4 hours. Users remain logged in during typical work sessions.

refactor(images): optimize file loading
Implement lazy loading for attachments. Reduces initial page load time by 30%.

Now generate exactly two lines without any labels:"""


def build_prompt(files: Sequence[str], diff: str) -> str:
    """Build the generation prompt from staged files and their diff.

    Args:
        files: Staged file paths.
        diff: The staged diff text.

    Returns:
        The formatted prompt.
    """
    return COMMIT_PROMPT_TEMPLATE.format(files=", ".join(files), diff=diff)
