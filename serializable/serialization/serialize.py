from typing import Any

from .serialized_data import SerializedData
from ..registration.class_registry import ClassRegistry


def serialize(instance: Any, registry: ClassRegistry | None = None) -> SerializedData:
	""" Serializes an instance of a registered class into {"class": path, "data": cls.serialize(instance)}.
	The class of the instance must be registered itself. Registering a parent class does not cover its subclasses.

	Raises:
		UnregisteredTypeError: if the class of instance is not registered
	"""
	if registry is None:
		from .. import class_registry
		registry = class_registry

	cls = type(instance)
	full_path = registry.lookup(cls)

	return {"class": full_path, "data": cls.serialize(instance)}
