# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from decimal import Decimal
from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
DayOfMonth = Annotated[int, Field(ge=1, le=31)]

# Yearly cent-quantized sums must fit the default 28-digit decimal context
MAX_MONEY = Decimal("1e15")
Money = Annotated[Decimal, Field(ge=0, lt=MAX_MONEY)]
