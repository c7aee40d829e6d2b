import pytest

from serializable import ClassRegistry, StaticResolver, create_class_registry
from serializable.lib.counter import Counter
from tests.fixtures.models.points import Point, Vector


FIXTURES_PACKAGE = "tests.fixtures"


@pytest.fixture
def registry() -> ClassRegistry:
    """ Registry resolving paths against tests/fixtures, e.g. "models/points[Point]". """
    return create_class_registry(root_package=FIXTURES_PACKAGE)


@pytest.fixture
def counter_registry() -> ClassRegistry:
    """ Registry resolving paths against the serializable package itself, e.g. "lib/counter[Counter]". """
    return create_class_registry(root_package="serializable")


@pytest.fixture
def static_resolver() -> StaticResolver:
    return StaticResolver({
        "lib/counter[Counter]": Counter,
        "models/points[Point]": Point,
        "models/points[Vector]": Vector,
    })


@pytest.fixture
def static_registry(static_resolver) -> ClassRegistry:
    return create_class_registry(resolver=static_resolver)
