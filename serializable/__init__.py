"""
Class Registration Module

This module provides a registry of serializable classes and the functions to serialize
instances of them into {"class": path, "data": ...} envelopes and back. The module
maintains a stateful `class_registry` object, used whenever no registry is passed explicitly.

Usage:
	await register_classes({"lib/counter[Counter]": Counter})
	serialized = serialize(Counter(5))   # {"class": "lib/counter[Counter]", "data": {"count": 5}}
	counter = await unserialize(serialized)
"""

from .registration.class_registry import ClassRegistry
from .registration.create_class_registry import create_class_registry
from .registration.serializable_protocol import Serializable
from .resolution.module_resolver import ModuleResolver

# Expose these at the module level
from .registration.register_classes import register_classes
from .registration.validate_serializable import validate_serializable
from .serialization.serialize import serialize
from .serialization.unserialize import unserialize
from .serialization.serialized_data import SerializedData
from .paths.parse_path import parse_path
from .paths.class_path import ClassPath
from .resolution.import_resolver import ImportResolver
from .resolution.static_resolver import StaticResolver
from .resolution.resolve_class import resolve_class
from .utilities.logger import set_logger, set_log_level
from .utilities.setup_error import SetupError
from .utilities.serialization_error import (
	SerializationError,
	PathFormatError,
	EnvelopeFormatError,
	RootLocationError,
	ContractError,
	IdentityMismatchError,
	ResolutionError,
	UnregisteredTypeError,
)


# Module-level stateful variable - paths are imported as top level modules until configure() is called
class_registry: ClassRegistry = create_class_registry()


def configure(root_package: str | None = None, resolver: ModuleResolver | None = None) -> None:
	""" Change how the module-level class_registry resolves paths. Classes that are already registered stay registered. """
	class_registry.resolver = create_class_registry(root_package, resolver).resolver
