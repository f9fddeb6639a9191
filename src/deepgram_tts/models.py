"""
Request and result types for the text-to-speech tool.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from deepgram_tts.errors import DeepgramTTSError, ErrorKind, InvalidRequestError

DEFAULT_FILENAME = "output.mp3"

TEXT_DESCRIPTION = "The text to convert to speech"
FILENAME_DESCRIPTION = (
    f"The filename for the output audio file (optional, defaults to '{DEFAULT_FILENAME}')"
)


class ToolRequest(BaseModel):
    """Arguments of one deepgram_text_to_speech call."""

    model_config = ConfigDict(strict=True, frozen=True)

    text: str = Field(..., description=TEXT_DESCRIPTION)
    filename: str = Field(DEFAULT_FILENAME, description=FILENAME_DESCRIPTION)

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Text input is empty")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"Text is not valid UTF-8: {e.reason}") from e
        return value

    @field_validator("filename")
    @classmethod
    def _filename_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Filename is empty")
        return value

    @classmethod
    def from_arguments(cls, arguments: Optional[Mapping[str, Any]]) -> "ToolRequest":
        """
        Validate raw tool-call arguments.

        A filename of None is treated as absent. Raises InvalidRequestError
        with a readable message when validation fails.
        """
        values = {k: v for k, v in (arguments or {}).items() if v is not None}
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise InvalidRequestError(_describe_validation_error(e)) from e


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "arguments"
        if detail["type"] == "missing":
            problems.append(f"Missing '{field}' parameter")
        else:
            msg = detail["msg"].removeprefix("Value error, ")
            problems.append(f"Invalid '{field}' parameter: {msg}")
    return "; ".join(problems)


@dataclass(frozen=True)
class SynthesisResult:
    """Outcome of one tool call: an output path, or an error kind and message."""

    message: str
    path: Optional[Path] = None
    error_kind: Optional[ErrorKind] = None

    @property
    def is_error(self) -> bool:
        return self.error_kind is not None

    @classmethod
    def ok(cls, path: Path, message: str) -> "SynthesisResult":
        return cls(message=message, path=path)

    @classmethod
    def error(cls, kind: ErrorKind, message: str) -> "SynthesisResult":
        return cls(message=message, error_kind=kind)

    @classmethod
    def from_exception(cls, exc: DeepgramTTSError) -> "SynthesisResult":
        return cls.error(exc.kind, exc.message)

    def to_call_tool_result(self) -> CallToolResult:
        text = f"Error: {self.message}" if self.is_error else self.message
        return CallToolResult(
            content=[TextContent(type="text", text=text)],
            isError=self.is_error,
        )
