from __future__ import annotations

from dataclasses import dataclass

from ..catalogue import Catalogue
from ..utils.telegram import Delivery


@dataclass(frozen=True)
class HandlerContext:
    """Collaborators available to a single update's handling.

    ``origin`` is the scheme and host images are served from, e.g.
    ``https://bot.example.org``.
    """

    delivery: Delivery
    catalogue: Catalogue
    origin: str


__all__ = ["HandlerContext"]
