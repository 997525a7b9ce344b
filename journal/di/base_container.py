# Standard library imports
from typing import Any, Dict, Type, TypeVar, Union

ServiceType = TypeVar('ServiceType')
ServiceKey = Union[Type[Any], str]


class BaseContainer:
    """Base dependency injection container with singleton registration"""

    def __init__(self) -> None:
        self.instances: Dict[ServiceKey, Any] = {}

    def register_singleton(self, interface: ServiceKey, instance: Any) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def get(self, interface: Union[Type[ServiceType], str]) -> ServiceType:
        """Get an instance of the requested type or string key"""
        if interface in self.instances:
            return self.instances[interface]

        raise ValueError(f"No registration found for {interface}")
