# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_move_agent

import contextlib
import subprocess
import time
from collections.abc import Sequence
from pathlib import Path
from typing import cast

import anyio
from anyio.abc import ByteReceiveStream, ByteSendStream
from loguru import logger

from coreason_move_agent.exceptions import SpawnError
from coreason_move_agent.models import ProcessResult


async def _drain(stream: ByteReceiveStream, sink: list[bytes]) -> None:
    """Read one pipe to EOF. Each drain task owns exactly one stream."""
    async for chunk in stream:
        sink.append(chunk)


async def _feed(stream: ByteSendStream, line: str) -> None:
    """Write a single line to the child's stdin, then close it."""
    try:
        await stream.send(f"{line}\n".encode("utf-8"))
    except (anyio.BrokenResourceError, anyio.ClosedResourceError, OSError) as e:
        # Child exited without reading its input
        logger.warning(f"Could not write to child stdin: {e}")
    finally:
        await stream.aclose()


async def run_process(
    program: str,
    args: Sequence[str],
    cwd: Path | None = None,
    stdin_line: str | None = None,
    timeout: float | None = None,
) -> ProcessResult:
    """Run an external program and capture its output.

    stdout and stderr are drained concurrently, so a child that fills one
    pipe while blocked on the other cannot stall. Stdin is only piped when
    ``stdin_line`` is given; otherwise the child reads from /dev/null.

    Args:
        program: Executable name or path.
        args: Arguments passed after the program name.
        cwd: Working directory for the child.
        stdin_line: Optional line (newline appended) written once after spawn.
        timeout: Seconds before the child is killed. None waits indefinitely.

    Returns:
        ProcessResult: Captured streams and exit status. A nonzero exit is a result, not an error.

    Raises:
        SpawnError: If the program cannot be started.
        TimeoutError: If the child outlives ``timeout``.
    """
    command = [program, *args]
    logger.info(f"Running command: {' '.join(command)}")

    start_time = time.time()
    try:
        process = await anyio.open_process(
            command,
            cwd=str(cwd) if cwd is not None else None,
            stdin=subprocess.PIPE if stdin_line is not None else subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        logger.error(f"Failed to start {program}: {e}")
        raise SpawnError(f"Failed to start {program}: {e}") from e

    stdout_chunks: list[bytes] = []
    stderr_chunks: list[bytes] = []

    async with process:
        try:
            with anyio.fail_after(timeout):
                async with anyio.create_task_group() as tg:
                    tg.start_soon(_drain, cast(ByteReceiveStream, process.stdout), stdout_chunks)
                    tg.start_soon(_drain, cast(ByteReceiveStream, process.stderr), stderr_chunks)
                    if stdin_line is not None:
                        tg.start_soon(_feed, cast(ByteSendStream, process.stdin), stdin_line)
                    exit_code = await process.wait()
        except TimeoutError as e:
            logger.warning(f"Command {program} exceeded {timeout}s. Killing pid {process.pid}.")
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            raise TimeoutError(f"Execution exceeded {timeout} seconds limit.") from e

    duration = time.time() - start_time

    result = ProcessResult(
        stdout=b"".join(stdout_chunks).decode("utf-8", errors="replace"),
        stderr=b"".join(stderr_chunks).decode("utf-8", errors="replace"),
        exit_code=exit_code,
        execution_duration=duration,
    )

    if result.succeeded:
        logger.info(f"Command {program} finished in {duration:.2f}s")
    else:
        logger.warning(f"Command {program} exited with code {exit_code}")

    return result
