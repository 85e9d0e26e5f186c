import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from hedera_intent_kit.shared.configuration import Configuration, Context
from hedera_intent_kit.shared.tool import Tool

logger = logging.getLogger(__name__)


@dataclass
class Plugin:
    name: str
    tools: Callable[[Context], List[Tool]]
    version: Optional[str] = None
    description: Optional[str] = None


def _core_plugins() -> List[Plugin]:
    # imported lazily: the plugins package depends on this module
    from hedera_intent_kit.plugins import CORE_PLUGINS

    return list(CORE_PLUGINS)


class PluginRegistry:
    """Collects tools from registered plugins.

    With nothing registered, the core plugins are used.
    """

    def __init__(self) -> None:
        self._plugins: Dict[str, Plugin] = {}

    def register(self, plugin: Plugin) -> None:
        if plugin.name in self._plugins:
            logger.warning('Plugin "%s" is already registered. Overwriting.', plugin.name)
        self._plugins[plugin.name] = plugin

    def get_plugins(self) -> List[Plugin]:
        return list(self._plugins.values())

    @staticmethod
    def _load(plugins: List[Plugin], context: Context) -> List[Tool]:
        tools: List[Tool] = []
        for plugin in plugins:
            try:
                tools.extend(plugin.tools(context))
            except Exception:
                logger.exception('Error loading tools from plugin "%s"', plugin.name)
        return tools

    def get_tools(self, context: Context) -> List[Tool]:
        if not self._plugins:
            return self._load(_core_plugins(), context)
        return self._load(self.get_plugins(), context)

    def clear(self) -> None:
        self._plugins.clear()


def get_configured_tools(configuration: Configuration) -> List[Tool]:
    """Tools for a configuration: its plugins (or the core ones), filtered by method name."""
    registry = PluginRegistry()
    for plugin in configuration.plugins:
        registry.register(plugin)
    tools = registry.get_tools(configuration.context)
    if not configuration.tools:
        return tools
    wanted = set(configuration.tools)
    return [tool for tool in tools if tool.method in wanted]
