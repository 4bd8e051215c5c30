"""Service for running and timing solution files."""

import time
from typing import Optional

from loguru import logger

from domain.models import LanguageConfig, RunResult
from infrastructure.executor import SubprocessExecutor
from infrastructure.parsers import SolutionExecutorProtocol

from .workspace import WorkspaceBuilder


class SolutionRunner:
    """Resolves a day's solution file, runs it and measures wall-clock time."""

    def __init__(
        self,
        workspace: WorkspaceBuilder,
        executor: Optional[SolutionExecutorProtocol] = None,
    ):
        self.workspace = workspace
        self.executor = executor or SubprocessExecutor()

    async def run(
        self,
        language: LanguageConfig,
        year: int,
        day: int,
        part: int,
        timeout: float | None = None,
    ) -> RunResult:
        """
        Run one part of a day's solution.

        Raises:
            SolutionNotFoundError: If the solution file does not exist
            RunError: If the process fails or times out
        """
        path = self.workspace.solution_path(language, year, day, part)
        command = language.build_command(str(path), part)
        logger.info(f"Running {language.name} {year} day {day:02d} part {part}")

        start = time.perf_counter()
        stdout = await self.executor.execute(command, str(path.parent), timeout)
        elapsed = time.perf_counter() - start

        logger.info(f"Execution time: {elapsed:.2f} seconds")
        return RunResult(year=year, day=day, part=part, output=stdout.strip(), elapsed=elapsed)
