# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_move_agent

import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger

from coreason_move_agent.exceptions import WorkspaceError

MANIFEST_FILENAME = "Move.toml"
SOURCES_DIRNAME = "sources"
SOURCE_FILENAME = "contract.move"


@contextmanager
def materialize_workspace(code: str, manifest: str) -> Iterator[Path]:
    """Lay out a throwaway Move package on disk.

    Yields a fresh, uniquely named directory holding the manifest at its root
    and the source under ``sources/``. The whole tree is removed when the
    block exits, whether or not it raised.

    Args:
        code: Contents of the Move source file.
        manifest: Contents of the package manifest.

    Yields:
        Path: The package directory.

    Raises:
        WorkspaceError: If the directory or any file cannot be created.
    """
    try:
        root = Path(tempfile.mkdtemp(prefix="move-agent-"))
    except OSError as e:
        logger.error(f"Failed to create workspace directory: {e}")
        raise WorkspaceError(f"Failed to create workspace: {e}") from e

    try:
        try:
            (root / MANIFEST_FILENAME).write_text(manifest, encoding="utf-8")
            sources = root / SOURCES_DIRNAME
            sources.mkdir()
            (sources / SOURCE_FILENAME).write_text(code, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to populate workspace {root}: {e}")
            raise WorkspaceError(f"Failed to create workspace: {e}") from e

        logger.info(f"Contract workspace created at {root}")
        yield root
    finally:
        shutil.rmtree(root, ignore_errors=True)
        logger.debug(f"Workspace {root} removed")
