import logging
from typing import Optional

from google import genai
from google.genai import types

from vocalcoach.core.config.settings import settings
from ..domain.errors import GenerationError, EmptyResponseError
from ..domain.interfaces import ITextGenerator

logger = logging.getLogger(__name__)


class GeminiTextGenerator(ITextGenerator):
    """
    Hosted Gemini backend. Supports both audio and prompt input.
    One instance is bound to a single model + system instruction.
    """

    def __init__(
        self,
        model_name: str,
        system_instruction: Optional[str] = None,
        response_mime_type: Optional[str] = None,
        client: Optional[genai.Client] = None,
    ):
        self.model_name = model_name
        self.system_instruction = system_instruction
        self.response_mime_type = response_mime_type
        self.client = client or genai.Client(api_key=settings.GEMINI_API_KEY or None)

    def generate_from_audio(self, data: bytes, mime_type: str) -> str:
        logger.info(f"Gemini ({self.model_name}): sending {len(data)} bytes of {mime_type}")
        audio_part = types.Part.from_bytes(data=data, mime_type=mime_type)
        return self._generate([audio_part])

    def generate_from_prompt(self, prompt: str) -> str:
        logger.info(f"Gemini ({self.model_name}): sending prompt ({len(prompt)} chars)")
        return self._generate([prompt])

    def _generate(self, contents) -> str:
        config = types.GenerateContentConfig(
            system_instruction=self.system_instruction,
            response_mime_type=self.response_mime_type,
        )
        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=contents,
                config=config,
            )
        except Exception as e:
            raise GenerationError(f"Gemini request to {self.model_name} failed: {e}") from e

        if not response.text:
            raise EmptyResponseError(f"Gemini model {self.model_name} returned no text")
        return response.text
