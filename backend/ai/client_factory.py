"""AI client factory for the remote catalog matcher."""
from __future__ import annotations

import logging

import httpx
from openai import AsyncOpenAI

from backend.settings import get_settings


logger = logging.getLogger(__name__)

# Default client timeout
DEFAULT_TIMEOUT = 30.0


def _create_httpx_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """
    Create the async httpx transport used under the OpenAI client.

    Args:
        timeout: Request timeout in seconds

    Returns:
        Configured httpx.AsyncClient instance
    """
    return httpx.AsyncClient(
        timeout=timeout,
        limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
    )


class AIClientFactory:
    """Factory for creating AI clients."""

    @staticmethod
    def create_async_openai_client(
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> AsyncOpenAI:
        """
        Create an AsyncOpenAI client.

        The timeout is enforced here, by the transport; callers do not add
        their own.

        Args:
            api_key: OpenAI API key; falls back to settings.openai_api_key
            timeout: Client timeout in seconds

        Returns:
            AsyncOpenAI client instance

        Raises:
            ValueError: If no API key is configured
        """
        api_key = api_key or get_settings().openai_api_key
        if not api_key:
            raise ValueError("OpenAI API key not configured. Set OPENAI_API_KEY environment variable.")

        logger.debug("Creating AsyncOpenAI client (direct)")
        return AsyncOpenAI(
            api_key=api_key,
            timeout=timeout,
            http_client=_create_httpx_client(timeout),
        )
