from dataclasses import dataclass


@dataclass
class Point:
    x: int
    y: int

    @staticmethod
    def serialize(instance: 'Point') -> dict:
        return {"x": instance.x, "y": instance.y}

    @staticmethod
    def unserialize(serialized: dict) -> 'Point':
        return Point(serialized["x"], serialized["y"])


@dataclass
class Vector:
    """ Serializable, but never registered by the tests. """
    dx: int
    dy: int

    @classmethod
    def serialize(cls, instance: 'Vector') -> list[int]:
        return [instance.dx, instance.dy]

    @classmethod
    def unserialize(cls, serialized: list[int]) -> 'Vector':
        return cls(*serialized)


ORIGIN = Point(0, 0)
