import re
from typing import Any

from .class_path import ClassPath, MAX_LOCATION_PARTS, MIN_LOCATION_PARTS
from ..utilities.serialization_error import PathFormatError, RootLocationError


PATH_PATTERN = re.compile(r"^(.+)\[(\w+)\]$", re.ASCII)


def parse_path(full_path: Any, *, error_cls: type[PathFormatError] = PathFormatError) -> ClassPath:
	""" Parses a class path of the form "{location}[{Symbol}]" into a ClassPath.

	Raises:
		PathFormatError (or error_cls): if the path does not match the pattern, or the location has too many or empty segments
		RootLocationError: if the location is a single segment. Classes are expected to live in a subdirectory, never in the root.
	"""
	if not isinstance(full_path, str):
		raise error_cls(f"Path {full_path!r} is not a string.")

	match = PATH_PATTERN.fullmatch(full_path) # fullmatch: "$" alone would accept a trailing newline
	if not match:
		raise error_cls(f"Path \"{full_path}\" does not match pattern \"{{string}}[{{string}}]\".")
	location, symbol = match.groups()

	parts = location.split("/")
	if len(parts) < MIN_LOCATION_PARTS:
		raise RootLocationError(f"Path \"{full_path}\" points at the root directory. Cannot register classes imported from the root directory.")
	if len(parts) > MAX_LOCATION_PARTS:
		raise error_cls(f"Path \"{full_path}\" is nested too deeply. Locations may have at most {MAX_LOCATION_PARTS} segments, got {len(parts)}.")
	if not all(parts):
		raise error_cls(f"Path \"{full_path}\" contains an empty location segment.")

	return ClassPath(location=location, symbol=symbol)
