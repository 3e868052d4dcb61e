"""
Filter variants.

Every filter is an immutable value object holding a single ``amount`` that is
validated eagerly at construction. Values derived from ``amount`` (the
contrast factor, the gamma correction exponent and the alpha channel value)
are computed once when the filter is created.

The set of filters is closed: :data:`Filter` is the union of all variants and
code dispatching on a filter matches it exhaustively.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from computations.channel import CHANNEL_MAX, clamp_to_channel
from exceptions import InvalidFilterParameterError

CONTRAST_MAGIC = 259.0
GAMMA_LIMIT = 8.0


def _checked(filter_type: type, amount: float, in_domain: bool, domain: str) -> float:
    if not (math.isfinite(amount) and in_domain):
        raise InvalidFilterParameterError(filter_type.__name__, amount, domain)
    return amount


class _FilterModel(BaseModel):
    amount: float

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __init__(self, amount: float, **data: Any) -> None:
        super().__init__(amount=amount, **data)

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.amount:g})"


class Brightness(_FilterModel):
    """Scale red, green and blue by ``amount``, e.g. ``1.1`` for 110%."""

    @field_validator("amount")
    @classmethod
    def _validate_amount(cls, amount: float) -> float:
        return _checked(cls, amount, amount >= 0, "[0, inf)")


class Contrast(_FilterModel):
    """Stretch red, green and blue around the channel midpoint.

    ``amount`` ranges over the open interval (-255, 255); negative values
    reduce contrast, positive values increase it.
    """

    _factor: float = PrivateAttr()

    @field_validator("amount")
    @classmethod
    def _validate_amount(cls, amount: float) -> float:
        return _checked(
            cls, amount, -CHANNEL_MAX < amount < CHANNEL_MAX, "(-255, 255)"
        )

    def model_post_init(self, context: Any) -> None:
        self._factor = (CONTRAST_MAGIC * (self.amount + CHANNEL_MAX)) / (
            CHANNEL_MAX * (CONTRAST_MAGIC - self.amount)
        )

    @property
    def factor(self) -> float:
        return self._factor


class Gamma(_FilterModel):
    """Gamma correction of red, green and blue with exponent ``1 / amount``."""

    _correction: float = PrivateAttr()

    @field_validator("amount")
    @classmethod
    def _validate_amount(cls, amount: float) -> float:
        return _checked(cls, amount, 0 < amount < GAMMA_LIMIT, "(0, 8)")

    def model_post_init(self, context: Any) -> None:
        self._correction = 1.0 / self.amount

    @property
    def correction(self) -> float:
        return self._correction


class Alpha(_FilterModel):
    """Override the alpha channel with ``amount`` (0 transparent, 1 opaque)."""

    _alpha: int = PrivateAttr()

    @field_validator("amount")
    @classmethod
    def _validate_amount(cls, amount: float) -> float:
        return _checked(cls, amount, 0 <= amount <= 1, "[0, 1]")

    def model_post_init(self, context: Any) -> None:
        self._alpha = clamp_to_channel(self.amount * CHANNEL_MAX)

    @property
    def alpha(self) -> int:
        return self._alpha


type Filter = Brightness | Contrast | Gamma | Alpha
