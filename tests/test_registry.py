import pytest

from solowire.exceptions import SoloWireCircularDependencyError, SoloWireInvalidRegistrationError
from solowire.instance_cache import InstanceCache
from solowire.registry import BindingMap, FactoryRegistry, Registration
from solowire.resolution_stack import current_resolution_path, resolving
from solowire.types import Lifetime


def _factory(_: object) -> str:
    return "value"


class TestFactoryRegistry:
    def test_set_and_get(self) -> None:
        registry = FactoryRegistry()

        assert registry.set("service", _factory) is None
        assert registry.get("service") == Registration("service", _factory, Lifetime.SINGLETON)
        assert "service" in registry
        assert list(registry) == ["service"]

    def test_set_returns_replaced_registration(self) -> None:
        registry = FactoryRegistry()
        registry.set("service", _factory)

        previous = registry.set("service", str, Lifetime.TRANSIENT)

        assert previous is not None
        assert previous.factory is _factory
        assert registry.get("service") == Registration("service", str, Lifetime.TRANSIENT)
        assert len(registry) == 1

    def test_rejects_non_callable(self) -> None:
        registry = FactoryRegistry()

        with pytest.raises(SoloWireInvalidRegistrationError):
            registry.set("service", object())  # type: ignore[arg-type]

        assert "service" not in registry

    def test_get_missing(self) -> None:
        assert FactoryRegistry().get("missing") is None


class TestBindingMap:
    def test_bind(self) -> None:
        bindings = BindingMap()

        assert bindings.bind("abstract", "concrete") is None
        assert bindings.get("abstract") == "concrete"
        assert "abstract" in bindings
        assert "concrete" not in bindings

    def test_rebind_returns_previous(self) -> None:
        bindings = BindingMap()
        bindings.bind("abstract", "first")

        assert bindings.bind("abstract", "second") == "first"
        assert bindings.get("abstract") == "second"
        assert len(bindings) == 1


class TestInstanceCache:
    def test_store_and_get(self) -> None:
        cache = InstanceCache()
        value = object()

        assert cache.store("service", value) is value
        assert cache.has_instance("service")
        assert cache.get_instance("service") is value

    def test_first_writer_wins(self) -> None:
        cache = InstanceCache()
        first = object()
        cache.store("service", first)

        assert cache.store("service", object()) is first
        assert cache.get_instance("service") is first

    def test_none_is_cached(self) -> None:
        cache = InstanceCache()
        cache.store("nothing", None)

        assert "nothing" in cache
        assert cache.get_instance("nothing") is None

    def test_missing_instance(self) -> None:
        cache = InstanceCache()

        assert not cache.has_instance("missing")
        with pytest.raises(KeyError):
            cache.get_instance("missing")

    def test_lock_per_identifier(self) -> None:
        cache = InstanceCache()

        assert cache.lock_for("a") is cache.lock_for("a")
        assert cache.lock_for("a") is not cache.lock_for("b")


class TestResolutionStack:
    def test_nested_resolution(self) -> None:
        with resolving("a"), resolving("b"):
            assert current_resolution_path() == ("a", "b")
        assert current_resolution_path() == ()

    def test_reentry_raises(self) -> None:
        with resolving("a"), resolving("b"):
            with pytest.raises(SoloWireCircularDependencyError) as exc_info:
                with resolving("a"):
                    pass

            assert exc_info.value.resolution_path == ["a", "b", "a"]
            assert current_resolution_path() == ("a", "b")

    def test_stack_unwinds_on_error(self) -> None:
        with pytest.raises(RuntimeError), resolving("a"):
            raise RuntimeError

        assert current_resolution_path() == ()
