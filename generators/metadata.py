"""Video metadata generation (title, description, hashtags, thumbnail prompt)."""

import json
import logging

import httpx
from pydantic import ValidationError

from errors import MalformedResponseFailure, RemoteRequestFailure
from models import ContentMetadata
from providers.factory import get_llm_provider
from providers.llm.base import LLMProvider

logger = logging.getLogger(__name__)

METADATA_PROMPT = "Generate viral content metadata for a YouTube video about: {topic}"

METADATA_SYSTEM_PROMPT = """You write metadata for YouTube videos.
Return a catchy, viral title, an SEO-optimized description, a list of 5 trending
hashtags, and a highly detailed prompt an AI image generator can use to create
the thumbnail."""

METADATA_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING", "description": "A catchy, viral title"},
        "description": {"type": "STRING", "description": "A SEO-optimized description"},
        "hashtags": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "A list of 5 trending hashtags",
        },
        "thumbnailPrompt": {
            "type": "STRING",
            "description": "A highly detailed prompt for an AI image generator to create a thumbnail",
        },
    },
    "required": ["title", "description", "hashtags", "thumbnailPrompt"],
}


class MetadataGenerator:
    def __init__(self, provider: LLMProvider | None = None):
        self._provider = provider

    @property
    def provider(self) -> LLMProvider:
        if self._provider is None:
            self._provider = get_llm_provider()
        return self._provider

    async def generate(self, topic: str) -> ContentMetadata:
        """Request metadata for a topic.

        Raises:
            RemoteRequestFailure: the request did not complete.
            MalformedResponseFailure: the response is not valid metadata.
        """
        try:
            response = await self.provider.complete(
                system_prompt=METADATA_SYSTEM_PROMPT,
                user_prompt=METADATA_PROMPT.format(topic=topic),
                max_tokens=2048,
                json_mode=True,
                response_schema=METADATA_SCHEMA,
            )
        except httpx.HTTPError as e:
            raise RemoteRequestFailure(f"Metadata request failed: {str(e) or type(e).__name__}") from e

        return parse_metadata(response.text)


def parse_metadata(text: str) -> ContentMetadata:
    """Parse a model's JSON reply into ContentMetadata. Tolerates ```json fences."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.strip("`")
        if cleaned.lower().startswith("json"):
            cleaned = cleaned[4:]
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedResponseFailure(f"Metadata response is not JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponseFailure("Metadata response is not a JSON object")

    try:
        return ContentMetadata.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise MalformedResponseFailure(f"Metadata response missing or invalid: {fields}") from e
