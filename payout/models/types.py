"""Shared type definitions for the HTTP schemas."""

from typing import Annotated

from pydantic import Field

# Sale price exactly as the client sent it; the engine normalizes it
RawPrice = Annotated[
    int | float | str | None,
    Field(description="Sale price in yen, as a number or numeric string"),
]

# Whole-yen amount
Yen = Annotated[int, Field(ge=0, description="Amount in yen")]
