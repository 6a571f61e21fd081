"""Commit generation pipeline.

Runs one invocation through its stages:

    COLLECTING_INPUTS -> GENERATING_MESSAGE -> DRY_RUN_DISPLAY | COMMITTING -> DONE

Any error moves the pipeline to FAILED and is re-raised unchanged; the
caller decides how to report it. Nothing is retried.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from stagenote.config import AppConfig
from stagenote.formatters import CommitMessage, format_commit_message
from stagenote.git import (
    create_commit,
    format_commit_command,
    get_staged_diff,
    list_staged_files,
)
from stagenote.llm import TextGenerationClient, build_prompt, get_client

logger = logging.getLogger(__name__)


class Stage(Enum):
    """Pipeline stages."""

    COLLECTING_INPUTS = "collecting_inputs"
    GENERATING_MESSAGE = "generating_message"
    DRY_RUN_DISPLAY = "dry_run_display"
    COMMITTING = "committing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RunOptions:
    """Per-run switches supplied by the caller."""

    dry_run: bool = False
    max_diff_chars: Optional[int] = None


@dataclass
class PipelineResult:
    """Outcome of a successful run."""

    message: CommitMessage
    files: list[str]
    command: str
    committed: bool = False
    commit_output: str = ""
    stages: list[Stage] = field(default_factory=list)


class CommitPipeline:
    """Generate a commit message for the staged changes and optionally commit."""

    def __init__(
        self,
        config: AppConfig,
        options: Optional[RunOptions] = None,
        client: Optional[TextGenerationClient] = None,
    ):
        self.config = config
        self.options = options or RunOptions()
        self.client = client or get_client(config)
        self.stage = Stage.COLLECTING_INPUTS
        self.history: list[Stage] = [self.stage]

    def _enter(self, stage: Stage) -> None:
        logger.debug("Pipeline stage: %s -> %s", self.stage.value, stage.value)
        self.stage = stage
        self.history.append(stage)

    def collect_inputs(self) -> tuple[list[str], str]:
        """Read staged files and the staged diff.

        Raises:
            NoStagedFilesError: If nothing is staged.
            NoDiffError: If the diff is empty or unreadable.
        """
        files = list_staged_files()
        max_chars = self.options.max_diff_chars or self.config.max_diff_chars
        diff = get_staged_diff(max_chars=max_chars)
        return files, diff

    def generate_message(self, files: list[str], diff: str) -> CommitMessage:
        """Ask the model for a message and format the reply.

        Raises:
            GenerationError: If the endpoint call fails.
        """
        prompt = build_prompt(files, diff)
        raw_text = self.client.generate(prompt)
        return format_commit_message(raw_text)

    def run(
        self,
        on_message: Optional[Callable[[CommitMessage], None]] = None,
        on_inputs: Optional[Callable[[list[str]], None]] = None,
    ) -> PipelineResult:
        """Run the pipeline to completion.

        Args:
            on_message: Called with the formatted message before the dry-run
                display or commit stage is entered.
            on_inputs: Called with the staged files once inputs are collected,
                before the endpoint is called.

        Returns:
            The PipelineResult. ``committed`` is False for dry runs.

        Raises:
            NoStagedFilesError, NoDiffError, GenerationError, CommitFailedError:
                Propagated after moving to the FAILED stage.
        """
        try:
            files, diff = self.collect_inputs()
            if on_inputs is not None:
                on_inputs(files)

            self._enter(Stage.GENERATING_MESSAGE)
            message = self.generate_message(files, diff)
            result = PipelineResult(
                message=message,
                files=files,
                command=format_commit_command(message),
            )
            if on_message is not None:
                on_message(message)

            if self.options.dry_run:
                self._enter(Stage.DRY_RUN_DISPLAY)
            else:
                self._enter(Stage.COMMITTING)
                result.commit_output = create_commit(message)
                result.committed = True

            self._enter(Stage.DONE)
            result.stages = list(self.history)
            return result
        except Exception:
            self._enter(Stage.FAILED)
            raise
