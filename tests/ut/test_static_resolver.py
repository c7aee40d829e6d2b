import pytest

from serializable import PathFormatError, ResolutionError, StaticResolver, parse_path, resolve_class
from serializable.lib.counter import Counter
from tests.fixtures.models.points import Point, Vector


@pytest.mark.ut
@pytest.mark.asyncio
async def test_load_exports_returns_every_class_of_the_location(static_resolver):
    exports = await static_resolver.load_exports(parse_path("models/points[Point]"))

    assert exports == {"Point": Point, "Vector": Vector}


@pytest.mark.ut
@pytest.mark.asyncio
async def test_resolve_class(static_resolver):
    assert await resolve_class(parse_path("lib/counter[Counter]"), static_resolver) is Counter


@pytest.mark.ut
@pytest.mark.asyncio
async def test_unknown_location(static_resolver):
    with pytest.raises(ResolutionError) as exc_info:
        await resolve_class(parse_path("lib/missing[Counter]"), static_resolver)

    assert exc_info.value.path == "lib/missing[Counter]"


@pytest.mark.ut
@pytest.mark.asyncio
async def test_unknown_symbol(static_resolver):
    with pytest.raises(ResolutionError, match="no export named 'Missing'"):
        await resolve_class(parse_path("lib/counter[Missing]"), static_resolver)


@pytest.mark.ut
@pytest.mark.asyncio
async def test_factories_are_called_once():
    calls = []

    def counter_factory() -> type:
        calls.append(1)
        return Counter

    resolver = StaticResolver()
    resolver.add("lib/counter[Counter]", counter_factory)

    path = parse_path("lib/counter[Counter]")
    assert await resolve_class(path, resolver) is Counter
    assert await resolve_class(path, resolver) is Counter
    assert calls == [1]


@pytest.mark.ut
@pytest.mark.asyncio
async def test_add_replaces_previous_entry():
    resolver = StaticResolver({"models/points[Point]": Point})
    resolver.add("models/points[Point]", Vector)

    assert len(resolver) == 1
    assert await resolve_class(parse_path("models/points[Point]"), resolver) is Vector


@pytest.mark.ut
def test_add_validates_paths():
    resolver = StaticResolver()

    with pytest.raises(PathFormatError):
        resolver.add("counter", Counter)


@pytest.mark.ut
def test_add_requires_a_callable():
    resolver = StaticResolver()

    with pytest.raises(TypeError):
        resolver.add("lib/counter[Counter]", 42)  # type: ignore[arg-type]
