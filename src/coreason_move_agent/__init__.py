# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_move_agent

"""
coreason-move-agent
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .config import AgentConfig
from .exceptions import SpawnError, WorkspaceError
from .models import ContractSubmission, ProcessResult
from .process import run_process
from .toolchain import MoveToolchain
from .workspace import materialize_workspace

__all__ = [
    "AgentConfig",
    "ContractSubmission",
    "ProcessResult",
    "SpawnError",
    "WorkspaceError",
    "MoveToolchain",
    "materialize_workspace",
    "run_process",
]
