from typing import Any, Callable, Mapping

from ..paths.class_path import ClassPath
from ..paths.parse_path import parse_path
from ..utilities.serialization_error import ResolutionError


ClassFactory = Callable[[], type]


class StaticResolver:
    """
    Resolves locations from a lookup table built at startup instead of importing modules.

    Entries are added by full class path and store either the class itself or a
    zero-argument factory returning the class. Factories are called at most once,
    the first time their location is loaded, and the result is cached so that
    every load returns the same class object.

    Example:
        resolver = StaticResolver({"lib/counter[Counter]": Counter})
    """

    def __init__(self, table: Mapping[str, type | ClassFactory] | None = None) -> None:
        self._locations: dict[str, dict[str, type | ClassFactory]] = {}
        self._materialized: dict[tuple[str, str], Any] = {}
        if table:
            self.add_many(table)

    def __repr__(self) -> str:
        return f"StaticResolver({len(self)} classes)"

    def __len__(self) -> int:
        return sum(len(exports) for exports in self._locations.values())

    def add(self, full_path: str, cls_or_factory: type | ClassFactory) -> None:
        """ Add a single class (or class factory) under its full class path. """
        if not callable(cls_or_factory):
            raise TypeError(f"Expected a class or a class factory for path \"{full_path}\", got {type(cls_or_factory).__name__}.")
        path = parse_path(full_path)
        self._locations.setdefault(path.location, {})[path.symbol] = cls_or_factory
        self._materialized.pop((path.location, path.symbol), None)

    def add_many(self, table: Mapping[str, type | ClassFactory]) -> None:
        for full_path, cls_or_factory in table.items():
            self.add(full_path, cls_or_factory)

    async def load_exports(self, path: ClassPath) -> Mapping[str, Any]:
        exports = self._locations.get(path.location)
        if exports is None:
            raise ResolutionError(f"Path \"{path}\" does not resolve to a known location '{path.location}'.", str(path))

        # Factories run once, so later loads return the very same class
        result: dict[str, Any] = {}
        for symbol, value in exports.items():
            key = (path.location, symbol)
            if key not in self._materialized:
                self._materialized[key] = value if isinstance(value, type) else value()
            result[symbol] = self._materialized[key]
        return result
