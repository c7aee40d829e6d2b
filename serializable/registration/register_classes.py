import asyncio
from typing import Mapping

from .class_registry import ClassRegistry
from .validate_serializable import validate_serializable
from ..paths.parse_path import parse_path
from ..resolution.resolve_class import resolve_class
from ..utilities.logger import get_logger
from ..utilities.serialization_error import IdentityMismatchError, SerializationError
"""
Documentation:
	- All entries of one call are registered concurrently. The call raises the error of the first entry that fails.
	- Entries which succeeded before (or while) another entry failed stay registered. There is no rollback.
	- Registering the same class twice overwrites its path. Registering the same class twice in one call is a race: the last entry to finish wins.
"""


async def register_classes(serializable_classes: Mapping[str, type], registry: ClassRegistry | None = None) -> None:
	""" Register every class of serializable_classes (full class path -> class) into the registry.
	Without a registry, registers into the module-level class_registry.

	Example:
		await register_classes({
			"lib/counter[Counter]": Counter,
		})
	"""
	if registry is None:
		from .. import class_registry
		registry = class_registry

	logger = get_logger()
	logger.debug(f"Registering {len(serializable_classes)} classes...")

	await asyncio.gather(*(
		_register_class(full_path, cls, registry)
		for full_path, cls in serializable_classes.items()
	))

	logger.debug(f"Registered classes: {', '.join(serializable_classes.keys())}")


async def _register_class(full_path: str, cls: type, registry: ClassRegistry) -> None:
	""" Validate a single class and store it into the registry. """
	try:
		# Parse the path and validate the class before doing any (potentially slow) loading
		path = parse_path(full_path)
		validate_serializable(cls)

		# The path must truthfully name the class: loading it has to give back the very same class object
		resolved_cls = await resolve_class(path, registry.resolver)
		if resolved_cls is not cls:
			raise IdentityMismatchError(f"Path \"{full_path}\" does not resolve to given class \"{cls.__name__}\".", full_path, cls, resolved_cls)

	except SerializationError as e:
		get_logger().warning(f"Failed to register \"{full_path}\": {e}")
		raise

	registry.add(cls, full_path)
	get_logger().debug(f"Registered class {cls.__name__} as \"{full_path}\".")
