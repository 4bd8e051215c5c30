"""Subprocess execution of solution commands."""

import asyncio
import shlex

from loguru import logger

from domain.exceptions import RunError

from .parsers.interfaces import SolutionExecutorProtocol


class SubprocessExecutor(SolutionExecutorProtocol):
    """Runs a command with asyncio and captures its standard output."""

    async def execute(self, command: str, cwd: str, timeout: float | None = None) -> str:
        args = shlex.split(command)
        logger.debug(f"Executing {args} in {cwd}")

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                cwd=cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise RunError(f"Failed to start '{command}': {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout)
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            raise RunError(f"'{command}' timed out after {timeout} seconds") from None

        if process.returncode != 0:
            message = stderr.decode(errors="replace").strip()
            raise RunError(f"'{command}' exited with status {process.returncode}: {message}")

        return stdout.decode(errors="replace")
