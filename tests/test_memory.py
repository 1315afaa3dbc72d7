import pytest

from conftest import EchoLLM, ScriptedLLM, reply
from agent_network.agents.memory import (
    MAX_MESSAGES,
    MemoryAgent,
    build_system_prompt,
    extract_preferences,
)
from agent_network.models.agent_models import ChatMessage, UserPreferences


class TestPreferences:
    """Tests for preference extraction and prompt building."""

    def test_extracts_name_interests_and_facts(self):
        prefs = extract_preferences("My name is Ada. I love hiking. I live in Berlin.", UserPreferences())

        assert prefs.name == "Ada"
        assert prefs.interests == ["hiking"]
        assert prefs.facts == ["I live in Berlin."]

    def test_merges_with_existing_preferences(self):
        existing = UserPreferences(name="Ada", interests=["hiking"])
        prefs = extract_preferences("I enjoy chess", existing)

        assert prefs.name == "Ada"
        assert prefs.interests == ["hiking", "chess"]
        assert existing.interests == ["hiking"]

    def test_nothing_to_extract(self):
        assert extract_preferences("What time is it?", UserPreferences()).is_empty()

    def test_prompt_includes_known_information_and_recent_messages(self):
        messages = [
            ChatMessage(role="user", content="x" * 150, timestamp="t"),
            ChatMessage(role="assistant", content="ok", timestamp="t"),
        ]
        prompt = build_system_prompt(messages, UserPreferences(name="Ada", interests=["chess"]))

        assert "- Name: Ada" in prompt
        assert "- Interests: chess" in prompt
        assert "Recent conversation (2 total messages, showing last 2):" in prompt
        assert f"User: {'x' * 100}..." in prompt


class TestMemoryAgent:
    """Tests for the memory agent's per-thread state."""

    @pytest.mark.asyncio
    async def test_remembers_name_across_turns(self, store, thread_id):
        llm = ScriptedLLM(reply("Nice to meet you, Ada!"), reply("Your name is Ada."))
        agent = MemoryAgent(llm, store)

        first = await agent.run(thread_id, "My name is Ada")
        second = await agent.run(thread_id, "What's my name?")

        assert first.preferences.name == "Ada"
        assert first.message_count == 2
        assert second.message_count == 4
        messages = llm.calls[1]["messages"]
        assert "- Name: Ada" in messages[0].content
        assert [m.content for m in messages[1:]] == ["My name is Ada", "Nice to meet you, Ada!", "What's my name?"]

    @pytest.mark.asyncio
    async def test_keeps_last_twenty_messages(self, store, thread_id):
        agent = MemoryAgent(EchoLLM("ok"), store)
        for i in range(11):
            await agent.run(thread_id, f"question {i}")

        messages = await agent.get_messages(thread_id)
        assert len(messages) == MAX_MESSAGES
        assert messages[0].content == "question 1"
        assert messages[-1].content == "ok"

    @pytest.mark.asyncio
    async def test_empty_reply_uses_placeholder(self, store, thread_id):
        result = await MemoryAgent(ScriptedLLM(reply(None)), store).run(thread_id, "hello")
        assert result.response == "I apologize, I was unable to generate a response."
        assert result.preferences is None

    @pytest.mark.asyncio
    async def test_clear(self, store, thread_id):
        agent = MemoryAgent(EchoLLM("ok"), store)
        await agent.run(thread_id, "My name is Ada")
        await agent.clear(thread_id)

        assert await agent.get_messages(thread_id) == []
        assert (await agent.get_preferences(thread_id)).is_empty()
