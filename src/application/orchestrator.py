"""Async orchestrator composing the named puzzle workflows."""

import asyncio
from datetime import date
from typing import Optional

from loguru import logger

from domain.calendar import day_count
from domain.exceptions import AocError, ConfigError, RunError, SolutionNotFoundError
from domain.models import (
    AssetKind,
    LanguageConfig,
    MemberProgress,
    ProgressTable,
    PuzzleDayKey,
    RunResult,
    SubmissionRequest,
    SubmissionResult,
    SyncFailure,
    SyncReport,
)
from infrastructure.language_registry import LanguageRegistry
from infrastructure.parsers import RemoteClientProtocol
from services.asset_cache import AssetCache
from services.progress import ProgressTracker
from services.runner import SolutionRunner
from services.workspace import WorkspaceBuilder

from .context import ExecutionContext


class Orchestrator:
    """Runs setup, run, submit, progress and leaderboard workflows."""

    def __init__(
        self,
        *,
        registry: LanguageRegistry,
        cache: AssetCache,
        client: RemoteClientProtocol,
        workspace: WorkspaceBuilder,
        tracker: ProgressTracker,
        runner: SolutionRunner,
    ):
        """
        Initialize orchestrator with dependency injection.

        Args:
            registry: Language configuration lookup
            cache: Read-through cache for inputs and descriptions
            client: Puzzle platform client
            workspace: Workspace scaffolding and lookup
            tracker: Leaderboard summarization
            runner: Solution execution and timing
        """
        self.registry = registry
        self.cache = cache
        self.client = client
        self.workspace = workspace
        self.tracker = tracker
        self.runner = runner

    async def setup(
        self,
        language_name: str,
        year: int,
        ctx: ExecutionContext,
        today: Optional[date] = None,
    ) -> SyncReport:
        """
        Scaffold a year and synchronize every unlocked day's assets.

        A failure for one day is reported and skipped; the rest of the batch
        carries on.

        Raises:
            ConfigError: If the language is unknown
            ScaffoldError: If the workspace cannot be created
        """
        language = self.registry.get(language_name)
        days = day_count(year, today)

        logger.info(f"Step 1: Scaffolding {language.name} {year} ({days} day(s))")
        layout = self.workspace.scaffold(language, year, days)
        ctx.output(f"Created {len(layout.created_files)} file(s) in {layout.root}")

        logger.info("Step 2: Synchronizing inputs and descriptions")
        semaphore = asyncio.Semaphore(ctx.max_concurrency)
        jobs = [
            (PuzzleDayKey(year, day), kind)
            for day in range(1, days + 1)
            for kind in AssetKind
        ]
        results = await asyncio.gather(
            *(self._sync_asset(language, key, kind, ctx, semaphore) for key, kind in jobs),
            return_exceptions=True,
        )

        report = SyncReport(year=year)
        for (key, kind), result in zip(jobs, results):
            if isinstance(result, BaseException):
                if not isinstance(result, AocError):
                    logger.opt(exception=result).error(f"Unexpected error syncing {kind.value} for {key}")
                logger.warning(f"Failed to sync {kind.value} for {key}: {result}")
                ctx.output(f"Failed to sync {kind.value} for {key}: {result}")
                report.failures.append(SyncFailure(key=key, kind=kind, error=str(result)))
            else:
                report.fetched.append((key, kind))

        logger.info(
            f"Synchronized {len(report.fetched)} asset(s) for {year}, {len(report.failures)} failure(s)"
        )
        return report

    async def _sync_asset(
        self,
        language: LanguageConfig,
        key: PuzzleDayKey,
        kind: AssetKind,
        ctx: ExecutionContext,
        semaphore: asyncio.Semaphore,
    ) -> None:
        """Fetch one asset through the cache and copy it into its day directory."""
        if kind is AssetKind.INPUT:
            fetch = self.client.fetch_input
        else:
            fetch = self.client.fetch_description

        async def fetcher() -> str:
            async with semaphore:
                return await fetch(key.year, key.day, ctx.session_token)

        content = await self.cache.get_or_fetch(key, kind, fetcher)
        self.workspace.write_asset(language, key.year, key.day, kind, content)
        ctx.output(f"{kind.value.capitalize()} for year {key.year}, day {key.day} ready")

    def available_parts(self, language_name: str, year: int, day: int) -> list[int]:
        """
        Parts of a day that have a solution file.

        Raises:
            SolutionNotFoundError: If the day has no solution files at all
        """
        language = self.registry.get(language_name)
        parts = self.workspace.available_parts(language, year, day)
        if not parts:
            raise SolutionNotFoundError(f"No solution files found for {year} day {day:02d}")
        return parts

    async def run(
        self,
        language_name: str,
        year: int,
        day: int,
        part: int,
        ctx: ExecutionContext,
        submit: bool = False,
        timeout: Optional[float] = None,
    ) -> tuple[RunResult, Optional[SubmissionResult]]:
        """
        Run a solution and optionally submit its output once.

        Raises:
            ConfigError: If the language is unknown
            SolutionNotFoundError: If the year or solution file is missing
            RunError: If the solution process fails, or its output is empty when submitting
            SubmitError: If the submission is rejected by status
        """
        language = self.registry.get(language_name)
        if not self.workspace.project_dir(language, year).is_dir():
            raise SolutionNotFoundError(f"No solutions found for {language.name} {year}")

        ctx.output(f"Running Year {year}, Day {day:02d}, Part {part}")
        result = await self.runner.run(language, year, day, part, timeout)
        ctx.output(result.output)
        ctx.output(f"Execution time: {result.elapsed:.2f} seconds")

        if not submit:
            return result, None
        if not result.output:
            logger.error(f"Empty output for {year} day {day} part {part}, not submitting")
            raise RunError(f"Refusing to submit empty output for {year} day {day} part {part}")
        return result, await self.submit(year, day, part, result.output, ctx)

    async def submit(
        self, year: int, day: int, part: int, answer: str, ctx: ExecutionContext
    ) -> SubmissionResult:
        """Submit an answer. Never retried, whatever the outcome."""
        request = SubmissionRequest(year=year, day=day, part=part, answer=answer)
        result = await self.client.submit_answer(request, ctx.session_token)
        ctx.output(f"Answer submitted for Year {year}, Day {day}, Part {part}: {result.raw_message}")
        return result

    async def show_progress(
        self,
        year: int,
        ctx: ExecutionContext,
        member_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> ProgressTable:
        """
        Completion table for a member, bounded by the unlocked day count.

        Raises:
            ConfigError: If no leaderboard ID is available
            FetchError: If the leaderboard cannot be downloaded
            LeaderboardError: On non-success status or if the member is absent
            ParseError: If the leaderboard document is malformed
        """
        leaderboard_id = self._leaderboard_id(ctx)
        snapshot = await self.client.fetch_leaderboard(year, leaderboard_id, ctx.session_token)
        table = self.tracker.summarize(
            snapshot, member_id or leaderboard_id, days=day_count(year, today)
        )
        ctx.output(f"Advent of Code {year} Progress for {table.member_name}: {table.stars} star(s)")
        return table

    async def show_leaderboard(
        self,
        year: int,
        ctx: ExecutionContext,
        leaderboard_id: Optional[str] = None,
    ) -> list[MemberProgress]:
        """Leaderboard members ordered by local score."""
        leaderboard_id = leaderboard_id or self._leaderboard_id(ctx)
        snapshot = await self.client.fetch_leaderboard(year, leaderboard_id, ctx.session_token)
        standings = self.tracker.standings(snapshot)

        ctx.output(f"Leaderboard for Year {year}:")
        for member in standings:
            ctx.output(f"{member.display_name}: {member.local_score} points")
        return standings

    def clear_cache(self, ctx: ExecutionContext) -> None:
        self.cache.clear()
        ctx.output("Advent of Code cache cleared.")

    def infer_language(self) -> Optional[str]:
        """The single configured language already present in the workspace, if any."""
        known = set(self.registry.names())
        present = [name for name in self.workspace.existing_languages() if name in known]
        if len(present) == 1:
            return present[0]
        return None

    @staticmethod
    def _leaderboard_id(ctx: ExecutionContext) -> str:
        if not ctx.leaderboard_id:
            raise ConfigError("No leaderboard ID configured")
        return ctx.leaderboard_id
