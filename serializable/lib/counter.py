from typing import TypedDict

from .store import Readable, Writable, get


class CounterSerialized(TypedDict):
	count: int


class Counter:
	""" A counter whose count can be observed. Registered for serialization as "lib/counter[Counter]". """

	@classmethod
	def serialize(cls, instance: 'Counter') -> CounterSerialized:
		return {"count": get(instance._count)}

	@classmethod
	def unserialize(cls, serialized: CounterSerialized) -> 'Counter':
		return cls(serialized["count"])

	def __init__(self, count: int = 0):
		self._count: Writable[int] = Writable(count)

	@property
	def count(self) -> Readable[int]:
		return self._count.readable()

	def increment(self, by_amount: int = 1) -> None:
		self._count.update(lambda count: count + by_amount)

	def __str__(self) -> str:
		return f"class Counter {{ count: {get(self._count)} }}"
