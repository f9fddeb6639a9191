"""
Client for Deepgram's text-to-speech REST API.

Sends one authenticated POST per call and returns the MP3 bytes of the
response. Writing those bytes to disk is a separate step so a failed request
never leaves a file behind.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from deepgram_tts.errors import ApiError, FileSystemError, NetworkError

logger = logging.getLogger("deepgram-tts-client")

DEEPGRAM_SPEAK_URL = "https://api.deepgram.com/v1/speak"
VOICE_MODEL = "aura-asteria-en"
REQUEST_TIMEOUT = 30.0


class DeepgramClient:
    def __init__(self, api_key: str, http_client: Optional[httpx.Client] = None):
        self._api_key = api_key
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.Client(timeout=REQUEST_TIMEOUT)

    def __enter__(self) -> "DeepgramClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self._owns_http_client:
            self._http.close()

    def _headers(self) -> dict:
        return {
            "Authorization": f"Token {self._api_key}",
            "Content-Type": "application/json",
        }

    def synthesize(self, text: str) -> bytes:
        """
        Convert *text* to speech with the fixed voice model.

        Raises ApiError on a non-success status and NetworkError when
        Deepgram cannot be reached.
        """
        logger.info(f"Requesting speech from Deepgram ({VOICE_MODEL}): '{text[:50]}'")
        try:
            response = self._http.post(
                DEEPGRAM_SPEAK_URL,
                params={"model": VOICE_MODEL},
                headers=self._headers(),
                json={"text": text},
            )
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach Deepgram: {e}")
            raise NetworkError(f"Failed to reach Deepgram: {e}") from e

        if not response.is_success:
            logger.error(f"Deepgram returned {response.status_code}: {response.text}")
            raise ApiError(response.status_code, response.text)

        audio = response.content
        logger.info(f"Received {len(audio)} bytes of audio")
        return audio

    def save_audio(self, audio: bytes, filename: Union[str, Path]) -> Path:
        """Write *audio* to *filename* verbatim, replacing any existing file."""
        path = Path(filename)
        try:
            path.write_bytes(audio)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to write audio file {path}: {e}")
            raise FileSystemError(f"Failed to write audio file '{path}': {e}") from e
        logger.info(f"Saved audio to {path}")
        return path
