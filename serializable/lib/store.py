from typing import Callable, Generic, TypeVar


T = TypeVar('T')

Subscriber = Callable[[T], None]
Unsubscriber = Callable[[], None]


class Readable(Generic[T]):
	""" Read-only view of a Writable. Only exposes subscribe(). """

	def __init__(self, subscribe: Callable[[Subscriber[T]], Unsubscriber]):
		self.subscribe = subscribe


class Writable(Generic[T]):
	""" An observable value. Subscribers are called immediately with the current value, and again whenever it changes. """

	def __init__(self, value: T):
		self._value = value
		self._subscribers: list[Subscriber[T]] = []

	def subscribe(self, run: Subscriber[T]) -> Unsubscriber:
		self._subscribers.append(run)
		run(self._value)

		def unsubscribe() -> None:
			if run in self._subscribers:
				self._subscribers.remove(run)

		return unsubscribe

	def set(self, value: T) -> None:
		if value == self._value:
			return
		self._value = value
		for run in list(self._subscribers):
			run(value)

	def update(self, updater: Callable[[T], T]) -> None:
		self.set(updater(self._value))

	def readable(self) -> Readable[T]:
		return Readable(self.subscribe)


def get(store: Writable[T] | Readable[T]) -> T:
	""" Read the current value of a store through a one-off subscription. """
	values: list[T] = []
	unsubscribe = store.subscribe(values.append)
	unsubscribe()
	return values[0]
