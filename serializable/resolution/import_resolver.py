import asyncio
import importlib
from types import ModuleType
from typing import Any, Mapping

from ..paths.class_path import ClassPath
from ..utilities.logger import get_logger
from ..utilities.serialization_error import ResolutionError


class ImportResolver:
    """
    Resolves locations by importing them as Python modules.

    "lib/counter" is imported as "lib.counter", or "{root_package}.lib.counter"
    when a root package is configured. Imports run in a worker thread so a
    slow first import does not block the event loop.
    """

    def __init__(self, root_package: str | None = None) -> None:
        self.root_package = root_package

    def __repr__(self) -> str:
        return f"ImportResolver(root_package={self.root_package!r})"

    async def load_exports(self, path: ClassPath) -> Mapping[str, Any]:
        module = await asyncio.to_thread(self._import, path)
        return vars(module)

    def _import(self, path: ClassPath) -> ModuleType:
        # Each segment must be a single module name: no dots (relative imports, extra nesting) or other characters
        invalid_parts = [part for part in path.parts if not part.isidentifier()]
        if invalid_parts:
            raise ResolutionError(f"Path \"{path}\" does not resolve to a module: {invalid_parts} are not valid module names.", str(path))

        module_name = path.module_name(self.root_package)
        get_logger().debug(f"Importing module '{module_name}' for path \"{path}\".")
        try:
            return importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # Only translate errors about the addressed module (or one of its parents).
            # A missing import inside an existing module is a bug in that module and is left alone.
            if e.name is None or not _is_same_or_parent(e.name, module_name):
                raise
            raise ResolutionError(f"Path \"{path}\" does not resolve to an existing module '{module_name}'.", str(path)) from e


def _is_same_or_parent(name: str, module_name: str) -> bool:
    return module_name == name or module_name.startswith(name + ".")
