"""Offline completion client.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in CompletionClientFactory.
"""

import json
from typing import ClassVar

from resume_pipeline.extraction.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Returns a fixed empty résumé draft without any network call.

    With this client every field ends up filled by the regex extractor, which
    makes it useful for local runs without an API key.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "name": "",
        "email": "",
        "phone": "",
        "location": "",
        "title": "",
        "summary": "",
        "skills": [],
        "experience": [],
        "education": [],
        "educationDetails": [],
        "certifications": [],
        "languages": [],
        "experienceLevel": "",
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        max_tokens: int,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema, max_tokens
        return json.dumps(self.DEFAULT_RESPONSE)
