from dataclasses import dataclass


MIN_LOCATION_PARTS = 2
MAX_LOCATION_PARTS = 4


@dataclass(frozen=True)
class ClassPath:
	""" A parsed class path. For example "lib/counter[Counter]" will produce: location = "lib/counter", symbol = "Counter"
	The location addresses a module (relative to some root), the symbol is the name of the class exported by that module.
	"""
	location: str
	symbol: str

	def __str__(self) -> str:
		return f"{self.location}[{self.symbol}]"

	@property
	def parts(self) -> tuple[str, ...]:
		return tuple(self.location.split("/"))

	def module_name(self, root_package: str | None = None) -> str:
		""" Dotted module name for the location, optionally nested under root_package. "lib/counter" -> "lib.counter" """
		module_name = ".".join(self.parts)
		if root_package:
			return f"{root_package}.{module_name}"
		return module_name
