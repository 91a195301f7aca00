"""Unit tests for namespaces backed by live Python objects."""

from __future__ import annotations

import sys
import types

import pytest

from subinstall.adapters.namespace import (
    InMemoryNamespace,
    MappingNamespace,
    ObjectNamespace,
    PythonNamespaceResolver,
    caller_namespace,
)
from subinstall.interfaces.errors import NamespaceNotFoundError

# pylint: disable=magic-value-comparison

MARKER = "only defined in this test module"


class Base:
    """Class with an inherited method."""

    def greet(self):
        """Inherited method."""
        return "hello"


class Child(Base):
    """Subclass without own methods."""


# ============================================================================
#                              ObjectNamespace
# ============================================================================


class TestObjectNamespace:
    """Tests for ObjectNamespace."""

    @staticmethod
    def test_class_own_ignores_inherited_attributes():
        """own() only sees the class's own __dict__, lookup() follows the MRO."""
        namespace = ObjectNamespace(Child)
        assert namespace.own("greet") is None
        assert namespace.lookup("greet") is Base.greet

    @staticmethod
    def test_instance_lookup_sees_class_attributes():
        """Lookups on instances go through normal attribute access."""
        namespace = ObjectNamespace(Child())
        assert namespace.own("greet") is None
        assert namespace.lookup("greet")() == "hello"

    @staticmethod
    def test_module_name():
        """Modules are named by their import name."""
        module = types.ModuleType("finance.shady")
        assert ObjectNamespace(module).name == "finance.shady"

    @staticmethod
    def test_class_name_is_qualified():
        """Classes are named module.qualname."""
        assert ObjectNamespace(Child).name == f"{__name__}.Child"

    @staticmethod
    def test_builtin_class_name_is_bare():
        """Builtin classes are named by qualname alone."""
        assert ObjectNamespace(dict).name == "dict"

    @staticmethod
    def test_instance_name_mentions_type():
        """Plain objects get a descriptive name."""
        assert ObjectNamespace(Child()).name.startswith("<Child object at 0x")

    @staticmethod
    def test_rejects_objects_without_attribute_table():
        """Objects without __dict__ cannot be namespaces."""
        with pytest.raises(NamespaceNotFoundError):
            ObjectNamespace(42)

    @staticmethod
    def test_as_method_on_class_passes_the_invoking_class():
        """Class methods receive the class (or subclass) they are called on."""

        def whoami(invocant, word):
            return invocant, word

        class Target:
            """Fresh class."""

        class SubTarget(Target):
            """Subclass."""

        namespace = ObjectNamespace(Target)
        namespace.bind("whoami", namespace.as_method(whoami))
        assert Target.whoami("hi") == (Target, "hi")
        assert Target().whoami("hi") == (Target, "hi")
        assert SubTarget.whoami("hi") == (SubTarget, "hi")

    @staticmethod
    def test_as_method_on_module_passes_the_namespace():
        """Modules have no invocant; the namespace itself is passed."""

        def whoami(invocant, word):
            return invocant, word

        namespace = ObjectNamespace(types.ModuleType("m"))
        method = namespace.as_method(whoami)
        assert method("hi") == (namespace, "hi")
        assert method.__name__ == "whoami"

    @staticmethod
    def test_for_invocant():
        """The class itself maps back to its namespace, subclasses get their own."""
        namespace = ObjectNamespace(Base)
        assert namespace.for_invocant(Base) is namespace
        assert namespace.for_invocant(namespace) is namespace
        sub = namespace.for_invocant(Child)
        assert isinstance(sub, ObjectNamespace)
        assert sub.target is Child


# ============================================================================
#                              MappingNamespace
# ============================================================================


class TestMappingNamespace:
    """Tests for MappingNamespace."""

    @staticmethod
    def test_name_defaults_to_dunder_name():
        """The mapping's __name__ entry names the namespace."""
        assert MappingNamespace({"__name__": "script"}).name == "script"

    @staticmethod
    def test_name_fallback():
        """Anonymous mappings get a placeholder name."""
        assert MappingNamespace({}).name == "<mapping>"

    @staticmethod
    def test_bind_writes_through():
        """Bindings land in the wrapped mapping."""
        mapping: dict[str, object] = {}
        MappingNamespace(mapping).bind("f", len)
        assert mapping == {"f": len}


# ============================================================================
#                              PythonNamespaceResolver
# ============================================================================


class TestPythonNamespaceResolver:
    """Tests for PythonNamespaceResolver."""

    @staticmethod
    def test_resolves_registered_module_by_name(make_module):
        """A dotted name already in sys.modules resolves to that module."""
        module = make_module()
        namespace = PythonNamespaceResolver().resolve(module.__name__)
        assert isinstance(namespace, ObjectNamespace)
        assert namespace.target is module

    @staticmethod
    def test_never_imports_modules(tmp_path, monkeypatch):
        """An importable but unloaded module is not found, and stays unloaded."""
        (tmp_path / "subinstall_lazy_target.py").write_text("LOADED = True\n")
        monkeypatch.syspath_prepend(str(tmp_path))

        with pytest.raises(NamespaceNotFoundError):
            PythonNamespaceResolver().resolve("subinstall_lazy_target")
        assert "subinstall_lazy_target" not in sys.modules

    @staticmethod
    def test_resolves_class_by_dotted_name(make_module):
        """Without a colon, the longest loaded module prefix wins."""

        class Builder:
            """Class reachable through a module."""

        module = make_module(Builder=Builder)
        namespace = PythonNamespaceResolver().resolve(f"{module.__name__}.Builder")
        assert namespace.target is Builder  # type: ignore[attr-defined]

    @staticmethod
    def test_resolves_class_by_colon_name(make_module):
        """``module:Class`` names resolve to the class."""

        class Builder:
            """Class reachable through a module."""

        module = make_module(Builder=Builder)
        namespace = PythonNamespaceResolver().resolve(f"{module.__name__}:Builder")
        assert namespace.target is Builder  # type: ignore[attr-defined]

    @staticmethod
    @pytest.mark.parametrize(
        "target",
        [
            "subinstall_no_such_module",
            "subinstall:no_such_attr",
            "subinstall.no_such_attr",
            "not a name!",
            "",
        ],
    )
    def test_unresolvable_names_raise(target):
        """Names that reach nothing loaded raise NamespaceNotFoundError."""
        with pytest.raises(NamespaceNotFoundError) as excinfo:
            PythonNamespaceResolver().resolve(target)
        assert excinfo.value.target == target

    @staticmethod
    def test_module_globals_resolve_to_the_module(make_module):
        """A registered module's globals dict resolves to the module itself."""
        module = make_module()
        namespace = PythonNamespaceResolver().resolve(vars(module))
        assert isinstance(namespace, ObjectNamespace)
        assert namespace.target is module

    @staticmethod
    def test_plain_mapping_resolves_to_mapping_namespace():
        """Other mappings are wrapped as they are."""
        mapping = {"__name__": "scratch"}
        namespace = PythonNamespaceResolver().resolve(mapping)
        assert isinstance(namespace, MappingNamespace)
        assert namespace.mapping is mapping

    @staticmethod
    def test_passes_namespace_instances_through():
        """A Namespace given as target is used as-is."""
        namespace = InMemoryNamespace("sandbox")
        assert PythonNamespaceResolver().resolve(namespace) is namespace

    @staticmethod
    def test_resolves_classes_and_instances():
        """Classes and instances become ObjectNamespaces."""
        resolver = PythonNamespaceResolver()
        assert resolver.resolve(Child).target is Child  # type: ignore[attr-defined]
        obj = Child()
        assert resolver.resolve(obj).target is obj  # type: ignore[attr-defined]


# ============================================================================
#                              caller_namespace
# ============================================================================


class TestCallerNamespace:
    """Tests for caller_namespace."""

    @staticmethod
    def test_default_is_the_calling_code():
        """With the default stacklevel the calling module is returned."""
        assert caller_namespace().lookup("MARKER") == MARKER

    @staticmethod
    def test_unregistered_globals_become_mapping_namespace():
        """Code run in bare globals gets those globals back."""
        scratch = {"__name__": "scratch", "caller_namespace": caller_namespace}
        exec("found = caller_namespace()", scratch)  # pylint: disable=exec-used
        found = scratch["found"]
        assert isinstance(found, MappingNamespace)
        assert found.mapping is scratch

    @staticmethod
    def test_stacklevel_two_is_the_callers_caller():
        """stacklevel=2 skips the function asking for its caller."""
        scratch = {"__name__": "scratch", "caller_namespace": caller_namespace}
        exec(  # pylint: disable=exec-used
            "def who_called_me():\n    return caller_namespace(2)\n", scratch
        )
        assert scratch["who_called_me"]().lookup("MARKER") == MARKER

    @staticmethod
    def test_too_deep_raises():
        """Asking past the bottom of the stack is an error."""
        with pytest.raises(NamespaceNotFoundError):
            caller_namespace(100_000)
