# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

T = TypeVar("T")
Key = Union[Type[Any], str]


class BaseContainer:
    """Base dependency injection container: singletons and factories keyed by interface"""

    def __init__(self) -> None:
        self.instances: Dict[Key, Any] = {}
        self.factories: Dict[Key, Callable[[], Any]] = {}

    def register_singleton(self, interface: Union[Type[T], str], instance: T) -> None:
        """Register a ready-made instance (interface may be a type or a string key)"""
        self.instances[interface] = instance

    def register_factory(self, interface: Union[Type[T], str], factory: Callable[[], T]) -> None:
        """Register a factory called on every lookup"""
        self.factories[interface] = factory

    def has(self, interface: Key) -> bool:
        return interface in self.instances or interface in self.factories

    def get(self, interface: Union[Type[T], str]) -> T:
        """Get the instance registered for a type or string key"""
        if interface in self.instances:
            return self.instances[interface]

        if interface in self.factories:
            return self.factories[interface]()

        name = interface if isinstance(interface, str) else interface.__name__
        raise LookupError(f"No registration found for {name}")
