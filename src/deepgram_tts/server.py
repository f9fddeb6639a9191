from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field
import sys
import logging

from deepgram_tts.client import DeepgramClient
from deepgram_tts.config import API_KEY_ENV_VAR, Settings
from deepgram_tts.errors import DeepgramTTSError, MissingApiKeyError
from deepgram_tts.models import (
    DEFAULT_FILENAME,
    FILENAME_DESCRIPTION,
    TEXT_DESCRIPTION,
    SynthesisResult,
    ToolRequest,
)

# Configure logging (stderr; stdout carries the MCP transport)
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("deepgram-tts")

SERVER_NAME = "deepgram-mcp"
TOOL_NAME = "deepgram_text_to_speech"
TOOL_DESCRIPTION = (
    "Generate an audio file from text using Deepgram's text-to-speech API. "
    "The audio will be saved as an MP3 file."
)


def text_to_speech(client: DeepgramClient, text: str | None, filename: str | None = DEFAULT_FILENAME) -> SynthesisResult:
    """
    Run one tool call: validate, synthesize, write the file.

    Never raises for request-level failures; they come back as an error result.
    """
    try:
        request = ToolRequest.from_arguments({"text": text, "filename": filename})
        audio = client.synthesize(request.text)
        path = client.save_audio(audio, request.filename)
    except DeepgramTTSError as e:
        logger.warning(f"{TOOL_NAME} failed ({e.kind.value}): {e.message}")
        return SynthesisResult.from_exception(e)

    message = (
        f"Successfully generated audio file '{request.filename}' from text: \"{request.text}\"\n"
        f"Saved to: {path.resolve()}"
    )
    logger.info(f"Generated {len(audio)} bytes into {request.filename}")
    return SynthesisResult.ok(path, message)


def create_server(client: DeepgramClient) -> FastMCP:
    """Build the MCP server with the text-to-speech tool bound to *client*."""
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def deepgram_text_to_speech(
        text: str = Field(..., description=TEXT_DESCRIPTION),
        filename: str | None = Field(DEFAULT_FILENAME, description=FILENAME_DESCRIPTION),
    ) -> CallToolResult:
        return text_to_speech(client, text, filename).to_call_tool_result()

    return mcp


def main():
    """Entry point for the console script."""
    try:
        settings = Settings.from_env()
    except MissingApiKeyError as e:
        logger.error(f"Cannot start: {e.message}")
        print(f"Error: {API_KEY_ENV_VAR} environment variable not set", file=sys.stderr)
        sys.exit(1)

    print("Starting Deepgram TTS MCP Server...", file=sys.stderr)
    with DeepgramClient(settings.api_key) as client:
        create_server(client).run()

if __name__ == "__main__":
    main()
