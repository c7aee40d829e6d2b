from typing import Any, Mapping, Protocol

from ..paths.class_path import ClassPath


class ModuleResolver(Protocol):
    """
    Loads the module addressed by the location of a ClassPath.

    A resolver only answers "what does this location export?". It does not
    know about serialize/unserialize or about the class registry.

    Implementations must raise ResolutionError when the location does not
    exist, and must return the same objects for the same location on every
    call, so that identity checks against registered classes hold.
    """

    async def load_exports(self, path: ClassPath) -> Mapping[str, Any]:
        """Return the names exported at `path.location`, keyed by symbol."""
