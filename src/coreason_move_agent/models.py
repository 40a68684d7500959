# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_move_agent

"""Data models for requests, responses and process results."""

from pydantic import BaseModel, Field


class ContractSubmission(BaseModel):
    """A Move source file plus its package manifest, as posted by the client.

    Attributes:
        code: Contents of the single Move source file.
        move_toml: Contents of the package manifest (Move.toml).
    """

    code: str
    move_toml: str

    def validation_error(self) -> str | None:
        """Returns a message naming the first blank field, or None if both are set."""
        if not self.code.strip():
            return "Empty code"
        if not self.move_toml.strip():
            return "Empty manifest"
        return None


class ChatQuestion(BaseModel):
    """A free-form question for the assistant."""

    question: str


class VulnerabilitiesResponse(BaseModel):
    vulnerabilities: list[str] = Field(default_factory=list)


class EndpointsResponse(BaseModel):
    endpoints: list[str]


class ErrorMessage(BaseModel):
    message: str


class ProcessResult(BaseModel):
    """Represents the result of running the external tool.

    Attributes:
        stdout: Standard output captured from the child.
        stderr: Standard error captured from the child.
        exit_code: The exit code of the process (0 for success).
        execution_duration: The duration of the run in seconds.
    """

    stdout: str
    stderr: str
    exit_code: int
    execution_duration: float

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def output(self) -> str:
        """Stdout on success, stderr on failure."""
        return self.stdout if self.succeeded else self.stderr
