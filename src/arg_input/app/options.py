"""
Validated read settings shared by the line splitter and the CLI.

Raw option values coming from the command line are turned into an immutable
``ReadOptions`` object here, so decoding problems such as an unknown codec
are reported before any input is opened.
"""

import codecs

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..types import PositiveInt
from . import config


class ImmutableModel(BaseModel):
    """Base class for immutable Pydantic models."""

    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
    )


class ReadOptions(ImmutableModel):
    """How the chained stream is buffered and decoded into lines."""

    encoding: str = config.DEFAULT_ENCODING
    errors: str = config.DEFAULT_ERRORS
    buffer_size: PositiveInt = config.DEFAULT_BUFFER_SIZE

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value.strip()).name
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e

    @field_validator("errors")
    @classmethod
    def _known_error_handler(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as e:
            raise ValueError(f"unknown error handler: {value}") from e
        return value


_OPTION_FLAGS: dict[str, str] = {
    "encoding": "--encoding",
    "errors": "--errors",
    "buffer_size": "--buffer-size",
}


def format_validation_errors(validation_error: ValidationError) -> str:
    """Describe each rejected read option by the flag that set it, one per line."""
    lines = []
    for error in validation_error.errors():
        field = str(error["loc"][0]) if error["loc"] else "options"
        flag = _OPTION_FLAGS.get(field, field)
        message = error["msg"].removeprefix("Value error, ")
        lines.append(f"  {flag}: {message}")
    return "\n".join(lines)


__all__ = ["ImmutableModel", "ReadOptions", "format_validation_errors"]
