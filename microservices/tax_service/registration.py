"""
Tax Service Registry

Table of tax calculation services declared by installed plugins. Filled once
while plugins load, then only read.
"""

import dataclasses
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .models import TaxServiceDescriptor

logger = logging.getLogger(__name__)


class TaxServiceRegistry:
    """Tax service descriptors keyed by service name"""

    def __init__(self):
        self._services: Dict[Any, Any] = {}

    def register(self, plugin_name: str, services: Iterable[Any]) -> None:
        """
        Register the tax services declared by one plugin

        Each entry is stored under its name with `plugin_name` stamped on it.
        A later registration under the same name replaces the earlier one.
        Entries are not validated here; one that is neither a descriptor nor
        a mapping is stored as given.

        Args:
            plugin_name: Name of the plugin declaring the services
            services: Descriptors in the order the plugin declared them
        """
        for service in services:
            name = _service_name(service)
            if name in self._services:
                logger.debug(
                    f"Tax service {name} from plugin {plugin_name} replaces the one "
                    f"from plugin {_plugin_name(self._services[name])}"
                )
            self._services[name] = _with_plugin_name(service, plugin_name)
            logger.info(f"Registered tax service {name} from plugin {plugin_name}")

    def register_plugin(self, plugin_options: Mapping[str, Any]) -> None:
        """Register tax services from the options a plugin was installed with"""
        tax_services = plugin_options.get("tax_services")
        if isinstance(tax_services, (list, tuple)):
            self.register(plugin_options.get("name"), tax_services)

    def get(self, name: Optional[str]) -> Optional[TaxServiceDescriptor]:
        """Get a tax service by name"""
        if name is None:
            return None
        return self._services.get(name)

    def names(self) -> List[str]:
        return list(self._services)

    def __contains__(self, name: object) -> bool:
        return name in self._services

    def __len__(self) -> int:
        return len(self._services)


def _service_name(service: Any) -> Any:
    if isinstance(service, Mapping):
        return service.get("name")
    return getattr(service, "name", None)


def _plugin_name(service: Any) -> Any:
    if isinstance(service, Mapping):
        return service.get("plugin_name")
    return getattr(service, "plugin_name", None)


def _with_plugin_name(service: Any, plugin_name: str) -> Any:
    if dataclasses.is_dataclass(service) and not isinstance(service, type):
        if any(f.name == "plugin_name" for f in dataclasses.fields(service)):
            return dataclasses.replace(service, plugin_name=plugin_name)
        return service
    if isinstance(service, Mapping):
        return {**service, "plugin_name": plugin_name}
    return service
