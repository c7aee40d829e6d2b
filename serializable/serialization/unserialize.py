from collections.abc import Mapping
from typing import Any

from .serialized_data import SerializedData, CLASS_KEY, DATA_KEY
from ..paths.parse_path import parse_path
from ..registration.class_registry import ClassRegistry
from ..resolution.resolve_class import resolve_class
from ..utilities.logger import get_logger
from ..utilities.serialization_error import ContractError, EnvelopeFormatError


async def unserialize(serialized: SerializedData, registry: ClassRegistry | None = None) -> Any:
	""" Rebuilds an instance from serialized data by loading the class named in serialized["class"] and calling its unserialize().

	NOTE: The class is found through the registry's resolver only. Membership in the registry is not checked,
	so any class that the path resolves to can be rebuilt, even if it was never registered.

	Raises:
		EnvelopeFormatError: if serialized is not a {"class": ..., "data": ...} mapping, or the class path is malformed
		RootLocationError: if the class path points at the root directory
		ResolutionError: if the class path does not resolve
		ContractError: if the path resolves to something that is not a class with unserialize()
	"""
	if registry is None:
		from .. import class_registry
		registry = class_registry

	if not isinstance(serialized, Mapping):
		raise EnvelopeFormatError(f"Expected serialized data to be a mapping. Instead received {type(serialized).__name__}.")
	if CLASS_KEY not in serialized or DATA_KEY not in serialized:
		raise EnvelopeFormatError(f"Serialized data must have the keys \"{CLASS_KEY}\" and \"{DATA_KEY}\". Instead received keys {list(serialized.keys())}.")

	path = parse_path(serialized[CLASS_KEY], error_cls=EnvelopeFormatError)
	cls = await resolve_class(path, registry.resolver)
	if not isinstance(cls, type) or not callable(getattr(cls, "unserialize", None)):
		raise ContractError(f"Path \"{path}\" resolves to {cls!r}, which does not implement the static method `unserialize(serialized: U) -> T`.", cls)

	if registry.lookup_class(str(path)) is not cls:
		get_logger().debug(f"Unserializing \"{path}\" into class {cls.__name__}, which is not registered.")

	return cls.unserialize(serialized[DATA_KEY])
