from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AgentMode(str, Enum):
    AUTONOMOUS = "autonomous"
    RETURN_BYTES = "returnBytes"


class Context(BaseModel):
    """Per-call execution context. The kit reads it and never mutates it."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    account_id: Optional[str] = None
    mode: AgentMode = AgentMode.AUTONOMOUS
    # Injected IHederaMirrornodeService; the default HTTP service is built when None.
    mirrornode_service: Optional[Any] = None
    # ledger id -> mirror node base URL, used only when the default service is built.
    mirrornode_base_urls: Optional[Dict[str, str]] = None


class Configuration(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Tool method names to expose; empty means every tool of the selected plugins.
    tools: List[str] = Field(default_factory=list)
    plugins: List[Any] = Field(default_factory=list)
    context: Context = Field(default_factory=Context)
