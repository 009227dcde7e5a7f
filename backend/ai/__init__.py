"""AI client construction."""

from backend.ai.client_factory import DEFAULT_TIMEOUT, AIClientFactory

__all__ = ["AIClientFactory", "DEFAULT_TIMEOUT"]
