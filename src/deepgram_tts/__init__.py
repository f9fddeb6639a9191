"""Deepgram text-to-speech exposed as an MCP tool."""

from deepgram_tts.client import DeepgramClient
from deepgram_tts.config import Settings
from deepgram_tts.errors import (
    ApiError,
    DeepgramTTSError,
    ErrorKind,
    FileSystemError,
    InvalidRequestError,
    MissingApiKeyError,
    NetworkError,
)
from deepgram_tts.models import DEFAULT_FILENAME, SynthesisResult, ToolRequest

__all__ = [
    "ApiError",
    "DEFAULT_FILENAME",
    "DeepgramClient",
    "DeepgramTTSError",
    "ErrorKind",
    "FileSystemError",
    "InvalidRequestError",
    "MissingApiKeyError",
    "NetworkError",
    "Settings",
    "SynthesisResult",
    "ToolRequest",
]
