"""FlowComponent abstract base class and ComponentCategory enum."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from fastapi_ip_echo.context import RequestContext


class ComponentCategory(Enum):
    """Processing component categories, defining strict execution order."""

    TRANSPORT = "transport"
    ADDRESS = "address"
    CUSTOM = "custom"

    @property
    def order(self) -> int:
        _ORDER = {
            "transport": 1,
            "address": 2,
            "custom": 3,
        }
        return _ORDER[self.value]


class FlowComponent(ABC):
    """Base abstraction for all processing units in a flow."""

    category: ClassVar[ComponentCategory]

    @abstractmethod
    async def resolve(self, ctx: RequestContext) -> None: ...
