from typing import Any

from .module_resolver import ModuleResolver
from ..paths.class_path import ClassPath
from ..utilities.serialization_error import ResolutionError


async def resolve_class(path: ClassPath, resolver: ModuleResolver) -> Any:
	""" Loads the location of the path through the resolver and returns the export named by the path's symbol.

	Raises:
		ResolutionError: if the location cannot be loaded or does not export the symbol
	"""
	exports = await resolver.load_exports(path)
	if path.symbol not in exports:
		raise ResolutionError(f"Path \"{path}\" does not resolve: '{path.location}' has no export named '{path.symbol}'.", str(path))
	return exports[path.symbol]
