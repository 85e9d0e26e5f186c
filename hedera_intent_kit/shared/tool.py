from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Type

from hiero_sdk_python import Client
from pydantic import BaseModel

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.models import ToolResponse


class Tool(ABC):
    """A single ledger operation exposed to an agent framework.

    Subclasses set the metadata in ``__init__`` and delegate ``execute`` to the
    module-level operation function.
    """

    method: str
    name: str
    description: str
    parameters: Type[BaseModel]
    outputParser: Callable[[str], Dict[str, Any]]

    @abstractmethod
    async def execute(
        self, client: Client, context: Context, params: Any
    ) -> ToolResponse: ...
