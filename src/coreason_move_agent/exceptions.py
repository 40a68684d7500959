# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_move_agent

"""Error kinds raised by the workspace and process layers."""


class WorkspaceError(RuntimeError):
    """The filesystem refused to create the temporary project layout."""


class SpawnError(RuntimeError):
    """The external program could not be started (missing or not executable).

    Distinct from a nonzero exit status, which always yields a ProcessResult.
    """
