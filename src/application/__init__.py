from typing import Optional

from application.context import ExecutionContext, OutputSink, log_sink
from application.orchestrator import Orchestrator
from infrastructure.credentials import CredentialsStore, Prompt
from infrastructure.settings import Settings


def create_orchestrator(settings: Settings) -> Orchestrator:
    """Factory function to create the orchestrator with all dependencies."""
    from infrastructure.aoc_client import AdventOfCodeClient
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.language_registry import LanguageRegistry
    from infrastructure.url_builder import URLBuilder
    from services import (
        ProgressTracker,
        SolutionRunner,
        WorkspaceBuilder,
        create_asset_cache,
    )

    # Create infrastructure dependencies
    http_client = AsyncHTTPClient(timeout=settings.request_timeout, user_agent=settings.user_agent)
    client = AdventOfCodeClient(http_client, URLBuilder(settings.base_url))
    workspace = WorkspaceBuilder(settings.workspace_root)

    return Orchestrator(
        registry=LanguageRegistry(settings.languages_file),
        cache=create_asset_cache(settings.cache_dir),
        client=client,
        workspace=workspace,
        tracker=ProgressTracker(),
        runner=SolutionRunner(workspace),
    )


def create_context(
    settings: Settings,
    session_prompt: Optional[Prompt] = None,
    leaderboard_prompt: Optional[Prompt] = None,
    output: OutputSink = log_sink,
) -> ExecutionContext:
    """Build an execution context from stored credentials, prompting when missing."""
    credentials = CredentialsStore(settings.config_file)
    token = credentials.session_token(session_prompt)
    if leaderboard_prompt is not None:
        leaderboard_id = credentials.leaderboard_id(leaderboard_prompt)
    else:
        leaderboard_id = credentials.stored_leaderboard_id()
    return ExecutionContext.from_settings(settings, token, leaderboard_id, output)


__all__ = [
    "ExecutionContext",
    "Orchestrator",
    "OutputSink",
    "create_context",
    "create_orchestrator",
]
