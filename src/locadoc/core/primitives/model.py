# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable, slot-based models. Records are borrowed by value for the
    duration of one generation call, so nothing downstream can mutate them.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Immutable models; generation never mutates its inputs
        slots=True,
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
