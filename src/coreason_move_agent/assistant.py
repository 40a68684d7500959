# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_move_agent

import httpx
import openai
from loguru import logger

from coreason_move_agent.config import AgentConfig

NO_RESPONSE = "No response"
ERROR_RESPONSE = "Error response"

CHAT_TEMPLATE = """You are blockchain expert specializing in Aptos Move smart contracts.
Answer this question shortly:
{question}
"""

AUDIT_TEMPLATE = """You are blockchain expert specializing in Aptos Move smart contracts.
Audit this code for vulnerabilities:
{code}
"""


class MoveAssistant:
    """Client for the text-generation API.

    Failures never propagate: they are logged and turned into sentinel strings.
    """

    def __init__(
        self,
        config: AgentConfig | None = None,
        client: openai.AsyncOpenAI | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initializes the assistant.

        Args:
            config: Service configuration holding the credential and model.
            client: Optional pre-built OpenAI client.
            http_client: Optional httpx.AsyncClient for connection pooling.
        """
        self.config = config or AgentConfig()
        self.model = self.config.openai_model
        self._http = http_client
        self._owns_http = False
        self._client = client
        if self._client is None and self.config.openai_api_key:
            if self._http is None:
                self._http = httpx.AsyncClient(timeout=self.config.llm_timeout)
                self._owns_http = True
            self._client = openai.AsyncOpenAI(
                api_key=self.config.openai_api_key,
                base_url=self.config.openai_base_url,
                http_client=self._http,
            )
        if self._client is None:
            logger.warning("OpenAI API key is not set; assistant requests will fail")

    async def query(self, prompt: str) -> str:
        """Send ``prompt`` as a system message and return the reply text."""
        if self._client is None:
            logger.error("Assistant query rejected: OpenAI API key is not configured")
            return ERROR_RESPONSE

        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "system", "content": prompt}],
            )
        except (openai.OpenAIError, httpx.HTTPError) as e:
            logger.error(f"Error: {e}")
            return ERROR_RESPONSE

        if not response.choices or not response.choices[0].message.content:
            return NO_RESPONSE
        return response.choices[0].message.content

    async def chat(self, question: str) -> str:
        if not question.strip():
            return "Empty question"
        return await self.query(CHAT_TEMPLATE.format(question=question))

    async def audit(self, code: str) -> str:
        if not code.strip():
            return "Empty code"
        return await self.query(AUDIT_TEMPLATE.format(code=code))

    async def aclose(self) -> None:
        """Release the HTTP client if this instance created it."""
        if self._owns_http and self._http is not None:
            await self._http.aclose()
