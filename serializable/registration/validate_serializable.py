import inspect
from typing import Any

from ..utilities.serialization_error import ContractError


SERIALIZE = "serialize"
UNSERIALIZE = "unserialize"

_SIGNATURES = {
	SERIALIZE: "serialize(instance: T) -> U",
	UNSERIALIZE: "unserialize(serialized: U) -> T",
}


def validate_serializable(cls: Any) -> None:
	""" Raises a ContractError if cls does not correctly implement the static methods serialize(instance) and unserialize(serialized).

	Both methods must be callable on the class itself and take exactly one required positional argument.
	Optional parameters are allowed, the same way they are ignored when counting a function's arity.
	"""
	if not isinstance(cls, type):
		raise ContractError(f"{cls!r} is not a class and cannot be registered for serialization.", cls)

	for method_name in (SERIALIZE, UNSERIALIZE):
		method = getattr(cls, method_name, None)
		if method is None or not callable(method) or _count_required_args(method) != 1:
			raise ContractError(f"{cls.__name__} does not correctly implement the static method `{_SIGNATURES[method_name]}`.", cls)


def _count_required_args(method: Any) -> int | None:
	""" Returns the number of required arguments of method as called on the class, or None if it cannot be inspected. """
	try:
		signature = inspect.signature(method)
	except (TypeError, ValueError):
		return None

	required = 0
	for parameter in signature.parameters.values():
		if parameter.default is not inspect.Parameter.empty:
			continue
		if parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
			continue
		# A required keyword-only argument can never be satisfied by serialize(instance)
		if parameter.kind is inspect.Parameter.KEYWORD_ONLY:
			return None
		required += 1
	return required
