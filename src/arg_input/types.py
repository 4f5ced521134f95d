import os
from typing import Annotated

from pydantic import Field

type StrPath = str | bytes | os.PathLike[str] | os.PathLike[bytes]
type LineFailure = OSError | UnicodeDecodeError

PositiveInt = Annotated[int, Field(gt=0)]

__all__ = ["LineFailure", "PositiveInt", "StrPath"]
