from dataclasses import dataclass, field
from typing import Any, Mapping, TYPE_CHECKING
from bidict import bidict

from ..resolution.module_resolver import ModuleResolver
from ..utilities.serialization_error import UnregisteredTypeError

if TYPE_CHECKING:
    from ..serialization.serialized_data import SerializedData


@dataclass
class ClassRegistry:
    """ A registry of all classes that can be serialized, mapping each class to the path it was registered under.

    Populated at startup with register_classes(), then only read from.
    serialize() needs the class to be registered, unserialize() only needs the resolver.
    """
    resolver: ModuleResolver
    """ Loads the module addressed by a path. Used both to check registrations and to unserialize. """

    class_path_dict: dict[type, str] = field(default_factory=dict)
    """ Registered classes -> full class path. Keyed by class identity, so two classes may share a path (e.g. before and after a module reload). """

    path_class_dict: bidict[str, type] = field(default_factory=bidict)
    """ Full class path -> the class most recently registered under it. """

    @classmethod
    def initialize(cls, resolver: ModuleResolver | None = None) -> 'ClassRegistry':
        """ Returns an empty registry. Without a resolver, paths are imported as top level modules. """
        from ..resolution.import_resolver import ImportResolver
        return ClassRegistry(
            resolver=resolver if resolver is not None else ImportResolver(),
            class_path_dict={},
            path_class_dict=bidict()
        )

    def __contains__(self, cls: object) -> bool:
        return cls in self.class_path_dict

    def __len__(self) -> int:
        return len(self.class_path_dict)

    def add(self, cls: type, full_path: str) -> None:
        """ Store a class that has already been validated. Overwrites any previous path of the class.
        Other classes registered under full_path keep their entries; full_path now looks up to cls. """
        self.class_path_dict[cls] = full_path
        # forceput also drops the previous path of cls from the inverse view
        self.path_class_dict.forceput(full_path, cls)

    def clear(self) -> None:
        self.class_path_dict.clear()
        self.path_class_dict.clear()

    def lookup(self, cls: type) -> str:
        """ Return the path the class was registered under. """
        full_path = self.class_path_dict.get(cls)
        if full_path is None:
            raise UnregisteredTypeError(f"Class {cls.__name__} is not registered.", cls)
        return full_path

    def lookup_class(self, full_path: str) -> type | None:
        """ Returns None if no class is registered under the path. """
        return self.path_class_dict.get(full_path)

    def is_registered(self, cls: type) -> bool:
        return cls in self.class_path_dict

    def registered_paths(self) -> list[str]:
        return list(dict.fromkeys(self.class_path_dict.values()))

    async def register_classes(self, serializable_classes: Mapping[str, type]) -> None:
        """ Wraps register_classes for easy access. """
        from .register_classes import register_classes
        await register_classes(serializable_classes, registry=self)

    def serialize(self, instance: Any) -> 'SerializedData':
        """ Wraps serialize for easy access. """
        from ..serialization.serialize import serialize
        return serialize(instance, registry=self)

    async def unserialize(self, serialized: 'SerializedData') -> Any:
        """ Wraps unserialize for easy access. """
        from ..serialization.unserialize import unserialize
        return await unserialize(serialized, registry=self)
