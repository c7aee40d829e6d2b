from typing import Protocol, TypeVar, runtime_checkable


T = TypeVar('T')
U = TypeVar('U')


@runtime_checkable
class Serializable(Protocol[T, U]):
	""" The static methods a class must provide to be registered for serialization.

	The methods live on the class, not on its instances. Implement them as classmethods or staticmethods:

	```python
	class Counter:
		@classmethod
		def serialize(cls, instance: 'Counter') -> dict:
			return {"count": get(instance._count)}

		@classmethod
		def unserialize(cls, serialized: dict) -> 'Counter':
			return cls(serialized["count"])
	```

	Type checkers can use this Protocol to check a class ahead of time. Registration still validates the
	shape at runtime with validate_serializable(), since isinstance() checks on a Protocol only look at attribute names.
	"""

	@classmethod
	def serialize(cls, instance: T) -> U: ...

	@classmethod
	def unserialize(cls, serialized: U) -> T: ...
