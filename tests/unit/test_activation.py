"""Tests for activation module."""

import pytest
from modetempo.activation import ActivationManager
from modetempo.hierarchy import HierarchyResolver
from modetempo.editor import Session
from modetempo.core.exceptions import CyclicHierarchyError


class TestActivationManager:
    """Tests for ActivationManager class."""

    def test_child_overrides_ancestor(self, registry, activation, session):
        """A child's binding for a tag wins over its ancestor's."""
        registry.register("x", "prog", "from prog")
        child = registry.register("x", "c++", "from c++")
        active = activation.activate(session, "c++")
        assert active["x"] == child.qualified_name
        assert session.active_set == {"x": child.qualified_name}

    def test_child_wins_regardless_of_registration_order(self, registry, activation, session):
        """The override follows the chain, not the most recent registration."""
        child = registry.register("x", "c++", "from c++")
        registry.register("x", "c", "from c")
        registry.register("x", "prog", "from prog")
        activation.activate(session, "c++")
        assert session.active_set["x"] == child.qualified_name
        activation.activate(session, "c")
        assert session.active_set["x"] == "tempo:c:x"

    def test_inherits_ancestor_templates(self, registry, activation, session):
        """Templates of every ancestor are visible."""
        registry.register("todo", "prog", "t")
        registry.register("if", "c", "i")
        registry.register("class", "c++", "k")
        activation.activate(session, "c++")
        assert list(session.active_set) == ["todo", "if", "class"]

    def test_does_not_see_descendants_or_siblings(self, registry, activation, session):
        registry.register("class", "c++", "k")
        registry.register("h1", "text", "h")
        activation.activate(session, "c")
        assert session.active_set == {}

    def test_empty_root(self, activation, session):
        """A root with nothing registered gets an empty active set."""
        assert activation.activate(session, "text") == {}
        assert session.active_set == {}
        assert session.content_type == "text"

    def test_idempotent(self, registry, activation, session):
        registry.register("if", "c", "i")
        first = activation.activate(session, "c")
        second = activation.activate(session, "c")
        assert first == second == session.active_set

    def test_replaces_previous_set(self, registry, activation, session):
        """Switching modes replaces the active set instead of merging."""
        registry.register("if", "c", "i")
        registry.register("h1", "text", "h")
        activation.activate(session, "c")
        activation.activate(session, "text")
        assert list(session.active_set) == ["h1"]

    def test_stale_until_reactivated(self, registry, activation, session):
        """Later registrations appear only after the next activation."""
        activation.activate(session, "c")
        definition = registry.register("while", "prog", "w")
        assert "while" not in session.active_set
        activation.activate(session, "c")
        assert session.active_set["while"] == definition.qualified_name

    def test_sessions_are_independent(self, registry, activation):
        registry.register("if", "c", "i")
        registry.register("h1", "text", "h")
        a, b = Session(), Session()
        activation.activate(a, "c")
        activation.activate(b, "text")
        assert list(a.active_set) == ["if"]
        assert list(b.active_set) == ["h1"]

    def test_installs_through_engine(self, registry, resolver, spy_engine, session):
        """The merged set is handed to the engine in one call."""
        installed = []

        def install(sess, active_set):
            installed.append(dict(active_set))
            sess.active_set = dict(active_set)

        spy_engine.install_active_set = install
        registry.register("if", "c", "i")
        ActivationManager(resolver, registry, spy_engine).activate(session, "c")
        assert installed == [{"if": "tempo:c:if"}]

    def test_cycle_leaves_session_untouched(self, registry, spy_engine, session):
        """A cyclic hierarchy fails activation without partial changes."""
        parents = {"c": "prog", "prog": None}
        manager = ActivationManager(HierarchyResolver(parents), registry, spy_engine)
        registry.register("if", "c", "i")
        manager.activate(session, "c")

        parents["prog"] = "c"
        with pytest.raises(CyclicHierarchyError):
            manager.activate(session, "c")
        assert session.active_set == {"if": "tempo:c:if"}
        assert session.content_type == "c"

    def test_effective_bindings(self, registry, activation):
        registry.register("if", "c", "i")
        assert activation.effective_bindings("c++") == {"if": "tempo:c:if"}
