"""Shared field types.

Ids and page numbers travel as JSON integers and are rendered by orjson,
which only handles signed 64-bit values.
"""

from typing import Annotated

from pydantic import Field


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
