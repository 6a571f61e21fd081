"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from stagenote.config import ENV_VARS


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(temp_dir, mocker, monkeypatch):
    """Keep tests away from the real ~/.stagenote, environment and .env files."""
    config_dir = temp_dir / ".stagenote"
    mocker.patch("stagenote.global_config._CONFIG_DIR", config_dir)
    mocker.patch("stagenote.config.load_dotenv")
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    return config_dir


@pytest.fixture
def sample_files():
    """Sample staged file list."""
    return ["src/auth/session.py", "tests/test_session.py"]


@pytest.fixture
def sample_diff():
    """Sample staged diff."""
    return """diff --git a/src/auth/session.py b/src/auth/session.py
index 1234567..abcdefg 100644
--- a/src/auth/session.py
+++ b/src/auth/session.py
@@ -1,5 +1,8 @@
 def refresh(token):
-    return None
+    return issue_token(token.user, ttl=TOKEN_TTL)
"""


@pytest.fixture
def sample_model_response():
    """Sample raw model output (two clean lines)."""
    return (
        "feat(auth): add token refresh\n"
        "Users stay logged in longer. Reduces repeated logins."
    )


@pytest.fixture
def sample_model_response_with_markdown():
    """Sample raw model output wrapped in a code fence with labels and bold."""
    return """```text
**Header:** feat(auth): add token refresh
**Body:** Users stay logged in longer. Reduces repeated logins.
```"""


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def git_result():
    """Factory for fake CompletedProcess results."""
    def _make(stdout: str = "", returncode: int = 0, stderr: str = "") -> MagicMock:
        result = MagicMock()
        result.stdout = stdout
        result.stderr = stderr
        result.returncode = returncode
        return result
    return _make
