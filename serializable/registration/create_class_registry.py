from .class_registry import ClassRegistry
from ..resolution.import_resolver import ImportResolver
from ..resolution.module_resolver import ModuleResolver
from ..utilities.logger import get_logger
from ..utilities.setup_error import SetupError


def create_class_registry(
		root_package: str | None = None,
		resolver: ModuleResolver | None = None
	) -> ClassRegistry:
	""" Create an empty, independent ClassRegistry.

	Args:
		root_package: Package that paths are relative to. "lib/counter[Counter]" resolves to "{root_package}.lib.counter".
			If not set, paths are imported as top level modules.
		resolver: Use this resolver instead of importing modules (for example a StaticResolver). Cannot be combined with root_package.
	"""
	if resolver is not None and root_package is not None:
		raise SetupError("Set either root_package or resolver, not both. root_package only applies to the default ImportResolver.", "resolver")

	if root_package is not None and not root_package.strip("."):
		raise SetupError(f"Invalid root_package {root_package!r}.", "root_package")

	if resolver is None:
		resolver = ImportResolver(root_package)
	get_logger().debug(f"Creating class registry with {resolver!r}.")

	return ClassRegistry.initialize(resolver)
