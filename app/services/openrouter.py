"""Integration helpers for the OpenRouter API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import Settings
from ..models import FilmAnalysis, ListSuggestion
from ..utils import extract_json_object

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are the CineVault curator, a film historian who writes short, precise commentary "
    "for curated film lists. You always respond with a single JSON value that matches the "
    "documented schema and never include commentary outside JSON."
)

ANALYSIS_TEMPLATE = """
Analyze the film "{title}" ({year}) directed by {director}.

{context}

Respond strictly with JSON following this structure:
{{
  "analysis": "A 2-sentence analysis of its significance in this context. No marketing taglines.",
  "trivia": "One obscure production fact."
}}
"""

LIST_CONTEXT = (
    'CONTEXT: This film is part of a curated list titled "{list_title}". '
    "Explain why it fits THIS specific list."
)
GENERAL_CONTEXT = "CONTEXT: General cinematic analysis."

SUGGESTION_TEMPLATE = """
Generate a list of {count} films fitting the theme, director, or vibe of: "{query}".

Respond strictly with JSON following this structure:
[
  {{"title": "Title", "year": 1999, "director": "Director"}}
]
"""


class OpenRouterClient:
    """Client responsible for short film commentary and list suggestions."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        self._settings = settings
        self._client = http_client

    @property
    def enabled(self) -> bool:
        return bool(self._settings.openrouter_api_key)

    async def film_analysis(
        self,
        title: str,
        director: str,
        year: int,
        *,
        context: str | None = None,
    ) -> FilmAnalysis | None:
        """Return a short analysis and trivia, or ``None`` when unavailable."""

        if not self.enabled:
            return None
        prompt = ANALYSIS_TEMPLATE.format(
            title=title,
            year=year,
            director=director,
            context=(
                LIST_CONTEXT.format(list_title=context) if context else GENERAL_CONTEXT
            ),
        )
        parsed = await self._complete(prompt, max_tokens=600)
        if not isinstance(parsed, dict):
            return None
        try:
            return FilmAnalysis.model_validate(parsed)
        except ValidationError:
            logger.warning("Model returned an invalid analysis for %s", title)
            return None

    async def list_suggestions(self, query: str, *, count: int = 5) -> list[ListSuggestion]:
        """Return films matching a free-text theme."""

        if not self.enabled or not query.strip():
            return []
        parsed = await self._complete(
            SUGGESTION_TEMPLATE.format(count=count, query=query.strip()),
            max_tokens=800,
        )
        if isinstance(parsed, dict):
            parsed = parsed.get("items") or parsed.get("films") or []
        if not isinstance(parsed, list):
            return []

        suggestions: list[ListSuggestion] = []
        for entry in parsed:
            if not isinstance(entry, dict):
                continue
            try:
                suggestions.append(ListSuggestion.model_validate(entry))
            except ValidationError:
                continue
        return suggestions[:count]

    async def _complete(self, prompt: str, *, max_tokens: int) -> Any:
        payload = {
            "model": self._settings.openrouter_model,
            "temperature": 0.7,
            "max_output_tokens": max_tokens,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        }
        headers = {
            "Authorization": f"Bearer {self._settings.openrouter_api_key}",
            "Content-Type": "application/json",
            "X-Title": "CineVault",
        }

        try:
            response = await self._client.post(
                "/chat/completions", json=payload, headers=headers
            )
        except httpx.HTTPError as exc:
            logger.warning("OpenRouter request failed: %s", exc)
            return None
        if response.status_code >= 400:
            logger.warning("OpenRouter request failed: %s", response.text)
            return None

        try:
            data = response.json()
        except ValueError:
            return None
        choices = data.get("choices", []) if isinstance(data, dict) else []
        if not choices:
            return None
        content = choices[0].get("message", {}).get("content")
        if not isinstance(content, str):
            return None
        try:
            return extract_json_object(content)
        except ValueError as exc:
            logger.warning("OpenRouter response was not JSON: %s", exc)
            return None
