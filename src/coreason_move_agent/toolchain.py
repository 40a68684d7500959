# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_move_agent

from pathlib import Path

from loguru import logger

from coreason_move_agent.config import AgentConfig
from coreason_move_agent.models import ContractSubmission, ProcessResult
from coreason_move_agent.process import run_process
from coreason_move_agent.workspace import materialize_workspace


class MoveToolchain:
    """Drives the external Move CLI against per-request package workspaces."""

    def __init__(self, config: AgentConfig | None = None):
        """Initializes the toolchain.

        Args:
            config: Service configuration. Defaults are used if omitted.
        """
        self.config = config or AgentConfig()
        self.binary = self.config.cli_binary
        self.timeout = self.config.execution_timeout

    async def run_in_workspace(self, submission: ContractSubmission, subcommand: str) -> ProcessResult:
        """Materialize the submission and run ``move <subcommand>`` against it.

        Args:
            submission: Source and manifest to lay out on disk.
            subcommand: The ``move`` subcommand, e.g. ``compile``.

        Returns:
            ProcessResult: Captured output of the tool.

        Raises:
            WorkspaceError: If the package layout cannot be written.
            SpawnError: If the CLI cannot be started.
            TimeoutError: If the CLI exceeds the configured timeout.
        """
        with materialize_workspace(submission.code, submission.move_toml) as package_dir:
            return await self._move(subcommand, package_dir)

    async def _move(self, subcommand: str, package_dir: Path) -> ProcessResult:
        return await run_process(
            self.binary,
            ["move", subcommand, "--package-dir", str(package_dir)],
            cwd=package_dir,
            timeout=self.timeout,
        )

    async def compile(self, submission: ContractSubmission) -> ProcessResult:
        return await self.run_in_workspace(submission, "compile")

    async def prove(self, submission: ContractSubmission) -> ProcessResult:
        return await self.run_in_workspace(submission, "prove")

    async def publish(self, submission: ContractSubmission) -> ProcessResult:
        """Initialize a CLI profile in the workspace, then publish the package.

        ``init`` is interactive; a single empty line accepts its defaults and
        stdin is closed right after. If ``init`` fails its result is returned
        and nothing is published.
        """
        with materialize_workspace(submission.code, submission.move_toml) as package_dir:
            init_result = await run_process(
                self.binary,
                ["init"],
                cwd=package_dir,
                stdin_line="",
                timeout=self.timeout,
            )
            if not init_result.succeeded:
                logger.warning("CLI init failed; skipping publish")
                return init_result

            return await self._move("publish", package_dir)

    async def help(self) -> ProcessResult:
        return await run_process(self.binary, ["move", "--help"], timeout=self.timeout)
