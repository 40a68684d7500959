# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_move_agent

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from coreason_move_agent import __version__
from coreason_move_agent.assistant import MoveAssistant
from coreason_move_agent.config import AgentConfig
from coreason_move_agent.exceptions import SpawnError, WorkspaceError
from coreason_move_agent.models import (
    ChatQuestion,
    ContractSubmission,
    EndpointsResponse,
    ErrorMessage,
    ProcessResult,
    VulnerabilitiesResponse,
)
from coreason_move_agent.toolchain import MoveToolchain

ENDPOINTS = [
    "GET /",
    "POST /audit",
    "POST /compile",
    "POST /deploy",
    "POST /prove",
    "GET /movement",
    "POST /chat",
]


def create_app(
    config: AgentConfig | None = None,
    toolchain: MoveToolchain | None = None,
    assistant: MoveAssistant | None = None,
) -> FastAPI:
    """Build the HTTP application.

    Args:
        config: Service configuration. Loaded from the environment if omitted.
        toolchain: Move CLI driver. Built from ``config`` if omitted.
        assistant: Text-generation client. Built from ``config`` if omitted.

    Returns:
        FastAPI: The configured application.
    """
    config = config or AgentConfig()
    toolchain = toolchain or MoveToolchain(config)
    assistant = assistant or MoveAssistant(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"Move agent ready (cli={config.cli_binary}, model={config.openai_model})")
        yield
        await assistant.aclose()

    app = FastAPI(
        title="CoReason Move Agent",
        description="Compile, publish, prove and audit Move smart contracts.",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content=ErrorMessage(message="Resource not found").model_dump(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=exc.headers,
        )

    async def run_tool(name: str, operation: Callable[[], Awaitable[ProcessResult]]) -> JSONResponse:
        try:
            result = await operation()
        except SpawnError as e:
            logger.error(f"{name} command error: {e}")
            return JSONResponse(status_code=500, content="Command error")
        except WorkspaceError as e:
            logger.error(f"{name} workspace error: {e}")
            return JSONResponse(status_code=500, content="Workspace error")
        except TimeoutError as e:
            logger.warning(f"{name} timed out: {e}")
            return JSONResponse(status_code=504, content="Command timed out")

        status = 200 if result.succeeded else config.tool_failure_status
        return JSONResponse(status_code=status, content=result.output)

    async def run_submission(
        name: str,
        submission: ContractSubmission,
        operation: Callable[[ContractSubmission], Awaitable[ProcessResult]],
    ) -> JSONResponse:
        error = submission.validation_error()
        if error is not None:
            return JSONResponse(status_code=500, content=error)
        return await run_tool(name, lambda: operation(submission))

    @app.get("/", response_model=EndpointsResponse)
    async def home() -> EndpointsResponse:
        return EndpointsResponse(endpoints=list(ENDPOINTS))

    @app.post("/audit", response_model=VulnerabilitiesResponse)
    async def audit_contract(submission: ContractSubmission) -> VulnerabilitiesResponse:
        audit_response = await assistant.audit(submission.code)
        logger.info(f"Audit response: {audit_response}")
        # TODO: parse the audit reply into findings once a response format is agreed.
        return VulnerabilitiesResponse(vulnerabilities=[])

    @app.post("/compile")
    async def compile_contract(submission: ContractSubmission) -> JSONResponse:
        return await run_submission("Compile", submission, toolchain.compile)

    @app.post("/deploy")
    async def deploy_contract(submission: ContractSubmission) -> JSONResponse:
        return await run_submission("Deploy", submission, toolchain.publish)

    @app.post("/prove")
    async def prove_contract(submission: ContractSubmission) -> JSONResponse:
        return await run_submission("Prove", submission, toolchain.prove)

    @app.get("/movement")
    async def movement() -> JSONResponse:
        return await run_tool("Help", toolchain.help)

    @app.post("/chat")
    async def chat_with_ai(payload: ChatQuestion) -> str:
        chat_response = await assistant.chat(payload.question)
        logger.info(f"Chat response: {chat_response}")
        return chat_response

    return app
