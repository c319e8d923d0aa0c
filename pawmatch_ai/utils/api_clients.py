"""
External API clients for PawMatch AI.
Handles communication with the external matching agent service.
"""

import asyncio
from typing import Any, Dict, Optional, Protocol, runtime_checkable
import aiohttp
from loguru import logger

from ..config import get_settings


@runtime_checkable
class MatchSubmitter(Protocol):
    """
    Capability for submitting an adopter assessment to a matching agent.

    Implementations return the agent's tagged response; failures are reported
    as ``{"success": False, "error": ...}`` rather than raised.
    """

    async def submit(self, message: str, agent_id: str) -> Dict[str, Any]:
        ...


class AgentClient:
    """Client for the matching agent HTTP endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.agent_api_base_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.agent_api_key
        self.timeout = timeout or settings.api_timeout

    def _get_headers(self) -> Dict[str, str]:
        """Get API request headers with authentication."""
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = self.api_key
        return headers

    async def submit(self, message: str, agent_id: str) -> Dict[str, Any]:
        """
        Send a message to an agent and return its tagged response.

        Args:
            message: Natural-language assessment request
            agent_id: Identifier of the agent to invoke

        Returns:
            Decoded response body, or a failure dictionary
        """
        api_url = f"{self.base_url}/agent"
        request_body = {"message": message, "agent_id": agent_id}

        logger.info(f"Submitting assessment to agent {agent_id}")
        logger.debug(f"Agent request body: {request_body}")

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    api_url,
                    headers=self._get_headers(),
                    json=request_body,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        logger.error(
                            f"Agent API error: {response.status}, "
                            f"url='{api_url}', "
                            f"response='{error_text}'"
                        )
                        return {
                            "success": False,
                            "error": f"HTTP {response.status}",
                        }

                    return await response.json()

        except asyncio.TimeoutError:
            logger.error(f"Agent {agent_id} timed out after {self.timeout}s")
            return {"success": False, "error": "timeout"}
        except aiohttp.ClientError as e:
            logger.error(f"Agent request failed: {e}")
            return {"success": False, "error": str(e)}
