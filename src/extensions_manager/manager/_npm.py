"""Package-manager adapter backed by the npm command-line tool."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ..errors import CommandError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class NpmCliAdapter:
    """Runs npm in a type's install root, bounded by ``timeout`` seconds."""

    def __init__(self, executable: str = "npm", timeout: float = 120.0) -> None:
        self._executable = executable
        self._timeout = timeout

    async def init(self, cwd: Path) -> None:
        await self._run(["init", "--yes"], cwd)

    async def install(self, name: str, cwd: Path) -> None:
        await self._run(["i", "--no-package-lock", name], cwd)

    async def update(self, name: str, cwd: Path) -> None:
        await self._run(["i", "--no-package-lock", f"{name}@latest"], cwd)

    async def uninstall(self, name: str, cwd: Path) -> None:
        await self._run(["uninstall", "--no-package-lock", name], cwd)

    async def _run(self, args: list[str], cwd: Path) -> None:
        cmd = [self._executable, *args]
        logger.debug("Running %s in %s", " ".join(cmd), cwd)
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=str(cwd),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise CommandError(
                f"{self._executable} is not installed or not in PATH (or {cwd} is missing)",
                command=cmd,
            ) from e

        try:
            _, stderr = await asyncio.wait_for(proc.communicate(), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            proc.kill()
            await proc.wait()
            raise CommandError(
                f"{' '.join(cmd)} timed out after {self._timeout}s", command=cmd
            ) from e

        if proc.returncode != 0:
            err = stderr.decode(errors="replace").strip()
            raise CommandError(
                f"{' '.join(cmd)} failed with exit code {proc.returncode}: {err}",
                command=cmd,
                returncode=proc.returncode,
                stderr=err,
            )
