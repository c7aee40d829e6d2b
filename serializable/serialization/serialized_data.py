from typing import Any, TypedDict


CLASS_KEY = "class"
DATA_KEY = "data"


SerializedData = TypedDict("SerializedData", {
	"class": str, # Full class path, e.g. "lib/counter[Counter]"
	"data": Any, # Whatever the class's serialize() returned. Never inspected here.
})
""" The {"class": ..., "data": ...} envelope produced by serialize() and consumed by unserialize(). """
