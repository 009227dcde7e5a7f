"""
OpenAI-backed remote catalog matcher.

Resolves the exercise names the local fuzzy matcher could not place. One call
per resolution pass, no retries: a failure surfaces as CatalogMatcherError and
the caller carries on without remote matches.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from application.ports.catalog_matcher import CatalogMatcherError
from backend.ai.client_factory import DEFAULT_TIMEOUT, AIClientFactory
from backend.services.llm.prompts import (
    CATALOG_MATCH_SYSTEM_PROMPT,
    build_catalog_match_prompt,
)
from backend.services.llm.schemas import (
    CatalogMatchEntry,
    CatalogMatchRequest,
    CatalogMatchResponse,
)

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


class OpenAICatalogMatcher:
    """
    Batched catalog matching through an OpenAI chat model.

    Implements application.ports.CatalogMatcher. Every match the model
    returns is checked against the catalog; anything else is dropped.
    """

    DEFAULT_MODEL = "gpt-4o-mini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Args:
            api_key: OpenAI API key (ignored when `client` is given)
            model: Chat model to use
            timeout: Transport timeout in seconds
            client: Pre-built AsyncOpenAI client
        """
        self._client = client or AIClientFactory.create_async_openai_client(
            api_key=api_key, timeout=timeout
        )
        self._model = model

    async def match_batch(
        self,
        names: Iterable[str],
        catalog: Sequence[str],
    ) -> CatalogMatchResponse:
        unique_names = sorted(set(names))
        if not unique_names:
            return CatalogMatchResponse()

        request = CatalogMatchRequest(names=unique_names, catalog=list(catalog))
        prompt = build_catalog_match_prompt(request.names, request.catalog)

        try:
            content = await self._call_llm(prompt)
            parsed = CatalogMatchResponse.model_validate_json(_CODE_FENCE.sub("", content.strip()))
        except OpenAIError as e:
            raise CatalogMatcherError(f"Catalog match request failed: {e}") from e
        except ValidationError as e:
            raise CatalogMatcherError(f"Malformed catalog match response: {e}") from e

        return self._validate(parsed, request)

    async def _call_llm(self, user_prompt: str) -> str:
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": CATALOG_MATCH_SYSTEM_PROMPT},
                {"role": "user", "content": user_prompt},
            ],
            temperature=0,
            response_format={"type": "json_object"},
        )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise CatalogMatcherError("Empty response from LLM")
        return content

    def _validate(
        self,
        parsed: CatalogMatchResponse,
        request: CatalogMatchRequest,
    ) -> CatalogMatchResponse:
        """
        Keep one entry per requested name, in request order.

        Matches outside the catalog become None. Case variants of a catalog
        name are mapped to the catalog's spelling.
        """
        by_lower: Dict[str, str] = {}
        for name in request.catalog:
            by_lower.setdefault(name.lower(), name)

        returned: Dict[str, Optional[str]] = {}
        for entry in parsed.matches:
            if entry.input not in returned:
                returned[entry.input] = entry.match

        entries: List[CatalogMatchEntry] = []
        for name in request.names:
            match = returned.get(name)
            canonical = by_lower.get(match.lower().strip()) if match else None
            if match and canonical is None:
                logger.debug(f"Dropping non-catalog match for '{name}': '{match}'")
            entries.append(CatalogMatchEntry(input=name, match=canonical))

        ignored = set(returned) - set(request.names)
        if ignored:
            logger.debug(f"Ignoring {len(ignored)} match entries for names that were not requested")

        return CatalogMatchResponse(matches=entries)
