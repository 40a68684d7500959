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
import os
import sys
from pathlib import Path

from loguru import logger

__all__ = ["logger", "set_console_level"]

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Remove default handler
logger.remove()

# Sink 1: Stdout/Stderr (Human-readable)
_console_sink_id = logger.add(
    sys.stderr,
    level=os.getenv("COREASON_MOVE_AGENT_LOG_LEVEL", "INFO"),
    format=CONSOLE_FORMAT,
)

# Ensure logs directory exists
log_path = Path("logs")
log_path.mkdir(parents=True, exist_ok=True)

# Sink 2: File (JSON, Rotation, Retention)
logger.add(
    log_path / "app.log",
    rotation="500 MB",
    retention="10 days",
    serialize=True,
    enqueue=True,
    level="INFO",
)


def set_console_level(level: str) -> None:
    """Re-create the stderr sink at ``level``.

    The sink is first built from the process environment at import time;
    this applies a level that only the loaded config knows about (e.g. from .env).
    """
    global _console_sink_id
    # Already gone if someone called logger.remove()
    with contextlib.suppress(ValueError):
        logger.remove(_console_sink_id)
    _console_sink_id = logger.add(sys.stderr, level=level.upper(), format=CONSOLE_FORMAT)
