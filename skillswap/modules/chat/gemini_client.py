"""
Gemini generateContent client for the learning mentor.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from skillswap.common.config import settings
from skillswap.common.exceptions import CollaboratorUnavailable

logger = logging.getLogger(__name__)

GENERATION_CONFIG = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 1024,
}


@dataclass
class MentorContext:
    """What the mentor knows about the user when answering."""
    display_name: Optional[str] = None
    bio: Optional[str] = None
    teach_skills: List[str] = field(default_factory=list)
    learn_skills: List[str] = field(default_factory=list)
    available_skills: List[str] = field(default_factory=list)


def build_mentor_prompt(context: MentorContext, message: str) -> str:
    teach = ", ".join(context.teach_skills) or "None listed"
    learn = ", ".join(context.learn_skills) or "None listed"
    return f"""You are an AI Learning Mentor for SkillSwap, a peer-to-peer skill exchange platform. Your role is to help users:

1. Find the perfect skill exchange matches
2. Suggest learning paths and resources
3. Schedule learning sessions
4. Track progress and achievements
5. Provide personalized recommendations

User Context:
- Name: {context.display_name or 'User'}
- Bio: {context.bio or 'No bio available'}
- Skills they can teach: {teach}
- Skills they want to learn: {learn}

Available skills in platform: {', '.join(context.available_skills)}

Guidelines:
- Be encouraging, helpful, and personalized
- Suggest specific matches when relevant
- Provide actionable learning advice
- Keep responses concise but informative
- Focus on skill exchange opportunities
- Mention achievements and gamification elements when appropriate

Current user message: {message}"""


class GeminiClient:
    """Thin wrapper over the Gemini REST API."""

    base_url = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key
        self.model = model or settings.GEMINI_MODEL
        self.timeout = timeout or settings.GEMINI_TIMEOUT_SECONDS
        self._http_client = http_client

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": GENERATION_CONFIG,
        }

    async def _post(self, client: httpx.AsyncClient, prompt: str) -> httpx.Response:
        return await client.post(
            self.url,
            params={"key": self.api_key},
            headers={"Content-Type": "application/json"},
            json=self._payload(prompt),
            timeout=self.timeout,
        )

    async def generate(self, prompt: str) -> str:
        """
        Send one prompt and return the first candidate's text.

        Raises:
            CollaboratorUnavailable: transport error, non-2xx status, or no candidates.
        """
        try:
            if self._http_client is not None:
                response = await self._post(self._http_client, prompt)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, prompt)
        except httpx.HTTPError as e:
            raise CollaboratorUnavailable(f"Gemini request failed: {e}") from e

        if response.status_code < 200 or response.status_code >= 300:
            logger.error(f"Gemini API error: {response.status_code} {response.text}")
            raise CollaboratorUnavailable(f"Gemini API error: {response.status_code}")

        try:
            data = response.json()
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise CollaboratorUnavailable("No response generated from Gemini API") from e
