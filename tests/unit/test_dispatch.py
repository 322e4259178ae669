"""Tests for dispatch module - the expand command."""

import pytest
from modetempo.core.types import DispatchOutcome
from modetempo.dispatch import ExpansionDispatcher, NO_TEMPLATES_MESSAGE
from modetempo.editor import Keymap, Session
from modetempo.prompt import ScriptedPrompt


def press(keymap, session):
    return keymap.invoke("TAB", session)


class TestRegionExpansion:
    """Dispatch with an active region."""

    @pytest.fixture
    def c_session(self, registry, activation):
        for tag in ("for", "if", "else"):
            registry.register(tag, "c", f"{tag}-body")
        session = Session.from_text("int x = 1;")
        activation.activate(session, "c")
        session.buffer.select(0, 10)
        return session

    def test_choose_expands_once(self, dispatcher, keymap, c_session, scripted_prompt, spy_engine, fallback):
        """Picking a label expands that template over the region, once."""
        scripted_prompt.answers.append("if")
        result = press(keymap, c_session)

        assert scripted_prompt.offered == [["for", "if", "else"]]
        assert spy_engine.calls_named("expand_over_region") == [
            ("expand_over_region", "tempo:c:if", "int x = 1;")
        ]
        assert spy_engine.calls_named("expand_at_cursor") == []
        assert result.outcome == DispatchOutcome.EXPANDED_REGION
        assert result.tag == "if"
        assert result.qualified_name == "tempo:c:if"
        assert c_session.buffer.text == "<if-body>int x = 1;</>"
        assert not c_session.buffer.has_region
        assert fallback.count == 0

    def test_region_in_middle(self, registry, activation, dispatcher, keymap, scripted_prompt):
        registry.register("b", "c", "B")
        session = Session.from_text("aa XX bb")
        activation.activate(session, "c")
        session.buffer.select(3, 5)
        scripted_prompt.answers.append("b")
        press(keymap, session)
        assert session.buffer.text == "aa <B>XX</> bb"

    def test_cancel_is_noop(self, dispatcher, keymap, c_session, scripted_prompt, spy_engine):
        """Cancelling the selection changes nothing."""
        scripted_prompt.answers.append(None)
        result = press(keymap, c_session)
        assert result.outcome == DispatchOutcome.CANCELLED
        assert spy_engine.expansions == []
        assert c_session.buffer.text == "int x = 1;"
        assert c_session.buffer.has_region

    def test_no_templates_notice(self, dispatcher, keymap, activation, scripted_prompt, spy_engine, fallback):
        """An empty active set reports and does nothing else."""
        session = Session.from_text("abc")
        activation.activate(session, "text")
        session.buffer.select(0, 3)

        result = press(keymap, session)

        assert result.outcome == DispatchOutcome.NO_TEMPLATES
        assert result.message == NO_TEMPLATES_MESSAGE
        assert scripted_prompt.notices == [NO_TEMPLATES_MESSAGE]
        assert scripted_prompt.offered == []
        assert spy_engine.expansions == []
        assert fallback.count == 0
        assert session.buffer.text == "abc"


class TestCursorExpansion:
    """Dispatch without a region."""

    @pytest.fixture
    def c_session(self, registry, activation):
        registry.register("for", "c", "FOR")
        session = Session.from_text("x; for")
        activation.activate(session, "c")
        return session

    def test_tag_before_point(self, dispatcher, keymap, c_session, spy_engine, fallback):
        """A complete tag before point is expanded exactly once, no fallback."""
        result = press(keymap, c_session)
        assert spy_engine.calls_named("expand_at_cursor") == [("expand_at_cursor", "tempo:c:for")]
        assert spy_engine.calls_named("expand_over_region") == []
        assert fallback.count == 0
        assert result.outcome == DispatchOutcome.EXPANDED_AT_CURSOR
        assert result.tag == "for"
        assert c_session.buffer.text == "x; FOR"

    def test_pass_through(self, dispatcher, keymap, c_session, spy_engine, fallback):
        """No tag before point re-issues the key to the default command once."""
        c_session.buffer.insert(" ")
        result = press(keymap, c_session)
        assert result.outcome == DispatchOutcome.PASSED_THROUGH
        assert fallback.count == 1
        assert spy_engine.expansions == []
        assert c_session.buffer.text == "x; for \t"

    def test_pass_through_restores_binding(self, dispatcher, keymap, c_session, fallback):
        """The dispatcher is only suspended for the single re-issue."""
        c_session.buffer.insert(" ")
        press(keymap, c_session)
        assert keymap.lookup("TAB") == dispatcher.dispatch
        press(keymap, c_session)
        assert fallback.count == 2

    def test_pass_through_without_fallback(self, spy_engine, scripted_prompt, activation):
        """With nothing underneath, the re-issue does nothing."""
        keymap = Keymap()
        dispatcher = ExpansionDispatcher(spy_engine, scripted_prompt)
        dispatcher.install(keymap)
        session = Session.from_text("abc")
        activation.activate(session, "text")
        result = keymap.invoke("TAB", session)
        assert result.outcome == DispatchOutcome.PASSED_THROUGH
        assert session.buffer.text == "abc"

    def test_pass_through_does_not_recurse(self, spy_engine, scripted_prompt, activation):
        """During the re-issue the key resolves past the dispatcher."""
        keymap = Keymap()
        dispatcher = ExpansionDispatcher(spy_engine, scripted_prompt)
        seen = []

        def default(session):
            seen.append(keymap.lookup("TAB"))

        keymap.bind("TAB", default)
        dispatcher.install(keymap)
        session = Session.from_text("")
        activation.activate(session, "text")

        result = keymap.invoke("TAB", session)

        assert seen == [default]
        assert len(spy_engine.calls_named("try_complete_at_cursor")) == 1
        assert result.metadata["fallback"] == "default"

    def test_dispatch_without_keymap(self, spy_engine, scripted_prompt, session):
        """An unbound dispatcher still reports pass-through."""
        dispatcher = ExpansionDispatcher(spy_engine, scripted_prompt)
        assert dispatcher.dispatch(session).outcome == DispatchOutcome.PASSED_THROUGH
        assert not dispatcher.dispatch(session).expanded

    def test_custom_notice(self, spy_engine, session):
        prompt = ScriptedPrompt()
        dispatcher = ExpansionDispatcher(spy_engine, prompt, no_templates_message="nothing here")
        session.buffer.text = "ab"
        session.buffer.select(0, 2)
        dispatcher.dispatch(session)
        assert prompt.notices == ["nothing here"]
