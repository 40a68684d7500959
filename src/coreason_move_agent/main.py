# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_move_agent

import uvicorn

from coreason_move_agent.api import create_app
from coreason_move_agent.config import AgentConfig
from coreason_move_agent.utils.logger import logger, set_console_level


def main() -> None:
    """Entry point for the HTTP server."""
    config = AgentConfig()
    set_console_level(config.log_level)
    app = create_app(config)
    logger.info(f"Starting Move agent on {config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":  # pragma: no cover
    main()
