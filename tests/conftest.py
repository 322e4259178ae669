"""Shared pytest fixtures for modetempo tests."""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from modetempo.core.base import TemplateEngine
from modetempo.activation import ActivationManager
from modetempo.dispatch import ExpansionDispatcher
from modetempo.editor import Keymap, Session
from modetempo.hierarchy import HierarchyResolver, ModeTable
from modetempo.prompt import ScriptedPrompt
from modetempo.templates import TemplateRegistry


# Spy template engine
class SpyEngine(TemplateEngine):
    """Template engine that records every call and expands trivially."""

    name = "spy"

    def __init__(self):
        self.bodies = {}
        self.labels = {}
        self.calls = []

    def define_template(self, qualified_name, body, label):
        self.calls.append(("define_template", qualified_name, body, label))
        self.bodies[qualified_name] = body
        self.labels[qualified_name] = label

    def expand_over_region(self, qualified_name, region_text):
        self.calls.append(("expand_over_region", qualified_name, region_text))
        return f"<{self.bodies[qualified_name]}>{region_text}</>"

    def expand_at_cursor(self, session, qualified_name):
        self.calls.append(("expand_at_cursor", qualified_name))
        label = self.labels[qualified_name]
        buffer = session.buffer
        buffer.delete(buffer.point - len(label), buffer.point)
        buffer.insert(str(self.bodies[qualified_name]))

    def try_complete_at_cursor(self, session, active_set):
        self.calls.append(("try_complete_at_cursor",))
        before = session.buffer.text_before_point
        for tag in sorted(active_set, key=len, reverse=True):
            if before.endswith(tag):
                return active_set[tag]
        return None

    def calls_named(self, name):
        return [call for call in self.calls if call[0] == name]

    @property
    def expansions(self):
        return [c for c in self.calls if c[0] in ("expand_over_region", "expand_at_cursor")]


@pytest.fixture
def spy_engine():
    """Create a spy template engine."""
    return SpyEngine()


@pytest.fixture
def modes():
    """A small mode forest: prog -> c -> c++, and a separate text root."""
    return ModeTable({
        "prog": None,
        "c": "prog",
        "c++": "c",
        "text": None,
    })


@pytest.fixture
def resolver(modes):
    return HierarchyResolver(modes)


@pytest.fixture
def registry(spy_engine):
    """A fresh registry per test."""
    return TemplateRegistry(spy_engine)


@pytest.fixture
def activation(resolver, registry, spy_engine):
    return ActivationManager(resolver, registry, spy_engine)


@pytest.fixture
def scripted_prompt():
    return ScriptedPrompt()


@pytest.fixture
def keymap():
    return Keymap()


class FallbackRecorder:
    """Default key command that records how often it ran."""

    def __init__(self):
        self.sessions = []

    def __call__(self, session):
        self.sessions.append(session)
        session.buffer.insert("\t")

    @property
    def count(self):
        return len(self.sessions)


@pytest.fixture
def fallback():
    return FallbackRecorder()


@pytest.fixture
def dispatcher(spy_engine, scripted_prompt, keymap, fallback):
    """A dispatcher bound to TAB over a recording default command."""
    keymap.bind("TAB", fallback)
    dispatcher = ExpansionDispatcher(spy_engine, scripted_prompt)
    dispatcher.install(keymap, "TAB")
    return dispatcher


@pytest.fixture
def session():
    return Session.from_text("")
