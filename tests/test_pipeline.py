"""Tests for stagenote.pipeline module."""

from unittest.mock import MagicMock

import pytest

from stagenote.config import AppConfig
from stagenote.formatters import CommitMessage
from stagenote.git import CommitFailedError, NoDiffError, NoStagedFilesError
from stagenote.llm import GenerationError
from stagenote.pipeline import CommitPipeline, RunOptions, Stage


@pytest.fixture
def mock_client(sample_model_response):
    """A text generation client returning a fixed response."""
    client = MagicMock()
    client.generate.return_value = sample_model_response
    return client


@pytest.fixture
def mock_git(mocker, sample_files, sample_diff):
    """Patch the git collaborators used by the pipeline."""
    return {
        "files": mocker.patch("stagenote.pipeline.list_staged_files", return_value=sample_files),
        "diff": mocker.patch("stagenote.pipeline.get_staged_diff", return_value=sample_diff),
        "commit": mocker.patch("stagenote.pipeline.create_commit", return_value="[main abc123]\n"),
    }


class TestCommitPipeline:
    """Tests for CommitPipeline.run."""

    def test_commits_generated_message(self, mock_git, mock_client):
        """Test the full run commits the formatted message."""
        pipeline = CommitPipeline(AppConfig(), RunOptions(), client=mock_client)

        result = pipeline.run()

        expected = CommitMessage(
            header="feat(auth): add token refresh",
            body="Users stay logged in longer. Reduces repeated logins.",
        )
        assert result.message == expected
        assert result.committed
        assert result.commit_output == "[main abc123]\n"
        mock_git["commit"].assert_called_once_with(expected)
        assert pipeline.stage == Stage.DONE
        assert result.stages == [
            Stage.COLLECTING_INPUTS,
            Stage.GENERATING_MESSAGE,
            Stage.COMMITTING,
            Stage.DONE,
        ]

    def test_prompt_contains_files_and_diff(self, mock_git, mock_client, sample_diff):
        """Test the client receives the built prompt."""
        CommitPipeline(AppConfig(), client=mock_client).run()

        prompt = mock_client.generate.call_args[0][0]
        assert "src/auth/session.py" in prompt
        assert sample_diff in prompt

    def test_dry_run_does_not_commit(self, mock_git, mock_client):
        """Test dry run skips the commit."""
        pipeline = CommitPipeline(AppConfig(), RunOptions(dry_run=True), client=mock_client)

        result = pipeline.run()

        assert not result.committed
        mock_git["commit"].assert_not_called()
        assert Stage.DRY_RUN_DISPLAY in result.stages
        assert Stage.COMMITTING not in result.stages
        assert result.command == (
            'git commit -m "feat(auth): add token refresh" '
            '-m "Users stay logged in longer. Reduces repeated logins."'
        )

    def test_on_message_called_before_commit(self, mock_git, mock_client):
        """Test the callback sees the message before committing."""
        seen = []

        def on_message(message):
            seen.append(message)
            mock_git["commit"].assert_not_called()

        CommitPipeline(AppConfig(), client=mock_client).run(on_message=on_message)

        assert len(seen) == 1
        mock_git["commit"].assert_called_once()

    def test_on_inputs_called_before_generation(self, mock_git, mock_client, sample_files):
        """Test the inputs callback sees the staged files before the endpoint is called."""
        seen = []

        def on_inputs(files):
            seen.append(files)
            mock_client.generate.assert_not_called()

        CommitPipeline(AppConfig(), client=mock_client).run(on_inputs=on_inputs)

        assert seen == [sample_files]

    def test_on_inputs_not_called_without_staged_files(self, mock_git, mock_client):
        """Test a run with nothing staged never reports collected inputs."""
        mock_git["files"].side_effect = NoStagedFilesError("No staged files to commit.")
        on_inputs = MagicMock()

        with pytest.raises(NoStagedFilesError):
            CommitPipeline(AppConfig(), client=mock_client).run(on_inputs=on_inputs)

        on_inputs.assert_not_called()

    def test_no_staged_files_fails_without_generation(self, mock_git, mock_client):
        """Test no staged files stops before any network call."""
        mock_git["files"].side_effect = NoStagedFilesError("No staged files to commit.")
        pipeline = CommitPipeline(AppConfig(), client=mock_client)

        with pytest.raises(NoStagedFilesError):
            pipeline.run()

        assert pipeline.stage == Stage.FAILED
        mock_client.generate.assert_not_called()
        mock_git["diff"].assert_not_called()

    def test_no_diff_fails(self, mock_git, mock_client):
        """Test an empty diff fails while collecting inputs."""
        mock_git["diff"].side_effect = NoDiffError("No staged changes to commit.")
        pipeline = CommitPipeline(AppConfig(), client=mock_client)

        with pytest.raises(NoDiffError):
            pipeline.run()

        assert pipeline.history == [Stage.COLLECTING_INPUTS, Stage.FAILED]
        mock_client.generate.assert_not_called()

    def test_generation_error_fails_without_commit(self, mock_git, mock_client):
        """Test a generation failure never reaches the commit."""
        mock_client.generate.side_effect = GenerationError("connection refused")
        pipeline = CommitPipeline(AppConfig(), client=mock_client)

        with pytest.raises(GenerationError):
            pipeline.run()

        assert pipeline.history == [
            Stage.COLLECTING_INPUTS,
            Stage.GENERATING_MESSAGE,
            Stage.FAILED,
        ]
        mock_git["commit"].assert_not_called()

    def test_commit_failure_is_attempted_once(self, mock_git, mock_client):
        """Test a rejected commit fails without retrying."""
        mock_git["commit"].side_effect = CommitFailedError("hook rejected")
        pipeline = CommitPipeline(AppConfig(), client=mock_client)

        with pytest.raises(CommitFailedError):
            pipeline.run()

        assert pipeline.stage == Stage.FAILED
        mock_git["commit"].assert_called_once()

    def test_empty_response_commits_fallback(self, mock_git, mock_client):
        """Test an empty model reply still yields a usable message."""
        mock_client.generate.return_value = "   "

        result = CommitPipeline(AppConfig(), client=mock_client).run()

        assert result.message.header == "chore: update changes"
        assert result.committed

    def test_max_diff_chars_option_overrides_config(self, mock_git, mock_client):
        """Test the run option takes precedence over config."""
        config = AppConfig(max_diff_chars=50000)

        CommitPipeline(config, RunOptions(max_diff_chars=100), client=mock_client).run()

        mock_git["diff"].assert_called_once_with(max_chars=100)

    def test_max_diff_chars_from_config(self, mock_git, mock_client):
        """Test config supplies the limit when no option is given."""
        CommitPipeline(AppConfig(max_diff_chars=2000), client=mock_client).run()

        mock_git["diff"].assert_called_once_with(max_chars=2000)

    def test_default_client_from_config(self):
        """Test a client is built from config when none is supplied."""
        pipeline = CommitPipeline(AppConfig(model="phi3"))

        assert pipeline.client.model == "phi3"
