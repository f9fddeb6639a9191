"""
Process-wide configuration.

The only setting is the Deepgram API key. It is read once at startup and
handed to the client; nothing reads the environment after that.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from deepgram_tts.errors import MissingApiKeyError

logger = logging.getLogger("deepgram-tts")

API_KEY_ENV_VAR = "DEEPGRAM_API_KEY"


@dataclass(frozen=True)
class Settings:
    api_key: str

    def __repr__(self):
        # Keep the key out of logs and tracebacks
        return "Settings(api_key='***')"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from the environment.

        When *environ* is None, a .env file in the working directory is loaded
        first (existing variables win) and os.environ is used.
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True), override=False)
            environ = os.environ

        api_key = environ.get(API_KEY_ENV_VAR, "").strip()
        if not api_key:
            raise MissingApiKeyError(f"{API_KEY_ENV_VAR} environment variable not set")

        logger.debug(f"Loaded {API_KEY_ENV_VAR} from environment")
        return cls(api_key=api_key)
