from typing import Any


class SerializationError(Exception):
	"""Base class for every error raised while registering, serializing or unserializing classes.
	NOTE: Like SetupError, the human readable message is stored in `message`. """

	def __init__(self, message: str) -> None:
		self.message = message
		super().__init__(self.message)

	def __str__(self) -> str:
		return self.message


class PathFormatError(SerializationError, ValueError):
	""" Raised when a class path does not match the pattern "{location}[{Symbol}]". """


class EnvelopeFormatError(PathFormatError):
	""" Raised when serialized data is not a {"class": ..., "data": ...} mapping, or its class path is malformed. """


class RootLocationError(SerializationError, ValueError):
	""" Raised when a class path points at a module in the root directory (a single-segment location). """


class ContractError(SerializationError, TypeError):
	""" Raised when a class does not correctly implement serialize(instance) / unserialize(serialized). """

	def __init__(self, message: str, cls: Any) -> None:
		self.cls = cls
		super().__init__(message)


class IdentityMismatchError(SerializationError):
	""" Raised when a class path resolves to a different class than the one it was registered with. """

	def __init__(self, message: str, path: str, cls: type, resolved: Any) -> None:
		self.path = path
		self.cls = cls
		self.resolved = resolved
		super().__init__(message)


class ResolutionError(SerializationError, LookupError):
	""" Raised when the location of a class path cannot be loaded, or does not export the symbol. """

	def __init__(self, message: str, path: str) -> None:
		self.path = path
		super().__init__(message)


class UnregisteredTypeError(SerializationError, KeyError):
	""" Raised when serializing an instance whose class was never registered. """

	def __init__(self, message: str, cls: type) -> None:
		self.cls = cls
		super().__init__(message)
