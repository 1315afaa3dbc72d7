# Memory agent: a conversational agent that remembers recent messages and user preferences per thread.
# Date: 2025-06-14
# Version: 0.1.0

import re
from datetime import datetime, timezone
from typing import List, Optional

from agent_network.models.agent_models import ChatMessage, MemoryOutput, UserPreferences
from agent_network.models.common import Message
from agent_network.services.llm_connector import LLMConnector
from agent_network.services.session_manager import ThreadStateStore
from agent_network.utils.logger import console

MESSAGES_KEY = "messages"
PREFERENCES_KEY = "preferences"

MAX_MESSAGES = 20
CONTEXT_MESSAGES = 10
PROMPT_RECENT_MESSAGES = 5
PROMPT_SNIPPET_LENGTH = 100
MAX_PREFERENCE_ITEMS = 10

NO_RESPONSE_MESSAGE = "I apologize, I was unable to generate a response."

_NAME_PATTERNS = [
    re.compile(r"my name is (\w+)", re.IGNORECASE),
    re.compile(r"i'm (\w+)", re.IGNORECASE),
    re.compile(r"call me (\w+)", re.IGNORECASE),
    re.compile(r"i am (\w+)", re.IGNORECASE),
]

_INTEREST_PATTERNS = [
    re.compile(r"i (?:like|love|enjoy) (\w+(?:\s+\w+)?)", re.IGNORECASE),
    re.compile(r"i'm (?:interested in|into) (\w+(?:\s+\w+)?)", re.IGNORECASE),
    re.compile(r"my (?:hobby|hobbies|favorite|favourite) (?:is|are) (\w+(?:\s+\w+)?)", re.IGNORECASE),
]

_FACT_PATTERNS = [
    re.compile(r"i (?:work|live|am from|was born) (?:at|in|as) (.+?)(?:\.|,|$)", re.IGNORECASE),
    re.compile(r"my (?:job|profession|occupation) is (.+?)(?:\.|,|$)", re.IGNORECASE),
]

MEMORY_SYSTEM_PROMPT = """You are a helpful assistant with memory. You remember previous conversations and user preferences within this thread.

When users share personal information (name, interests, facts about themselves), acknowledge it naturally and remember it for future reference.

When users ask about previous conversations or their stored information, recall it accurately.

Be conversational, friendly, and demonstrate that you remember context from earlier in the conversation."""


def _unique(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def extract_preferences(user_message: str, existing: UserPreferences) -> UserPreferences:
    """Picks up a name, interests and simple facts from what the user wrote."""
    updated = existing.model_copy(deep=True)

    for pattern in _NAME_PATTERNS:
        match = pattern.search(user_message)
        if match and len(match.group(1)) > 1:
            updated.name = match.group(1)
            break

    interests = list(existing.interests or [])
    for pattern in _INTEREST_PATTERNS:
        interests.extend(match.group(1).lower() for match in pattern.finditer(user_message))
    interests = _unique(interests)
    if interests:
        updated.interests = interests[:MAX_PREFERENCE_ITEMS]

    facts = list(existing.facts or [])
    for pattern in _FACT_PATTERNS:
        facts.extend(match.group(0).strip() for match in pattern.finditer(user_message) if len(match.group(1)) > 2)
    facts = _unique(facts)
    if facts:
        updated.facts = facts[:MAX_PREFERENCE_ITEMS]

    return updated


def build_system_prompt(messages: List[ChatMessage], preferences: UserPreferences) -> str:
    context = ""

    if not preferences.is_empty():
        context += "\n\nKnown information about the user:"
        if preferences.name:
            context += f"\n- Name: {preferences.name}"
        if preferences.interests:
            context += f"\n- Interests: {', '.join(preferences.interests)}"
        if preferences.facts:
            context += f"\n- Facts: {'; '.join(preferences.facts)}"

    if messages:
        recent = messages[-PROMPT_RECENT_MESSAGES:]
        context += f"\n\nRecent conversation ({len(messages)} total messages, showing last {len(recent)}):"
        for message in recent:
            role = "User" if message.role == "user" else "Assistant"
            content = message.content
            if len(content) > PROMPT_SNIPPET_LENGTH:
                content = f"{content[:PROMPT_SNIPPET_LENGTH]}..."
            context += f"\n{role}: {content}"

    return MEMORY_SYSTEM_PROMPT + context


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class MemoryAgent:
    """
    Keeps a sliding window of the last MAX_MESSAGES messages per thread
    plus a small preferences record, and feeds both back into every reply.
    """
    def __init__(self, llm: LLMConnector, store: ThreadStateStore):
        self._llm = llm
        self._store = store

    async def get_messages(self, thread_id: str) -> List[ChatMessage]:
        raw = await self._store.for_thread(thread_id).get(MESSAGES_KEY, [])
        return [ChatMessage.model_validate(item) for item in raw]

    async def get_preferences(self, thread_id: str) -> UserPreferences:
        raw = await self._store.for_thread(thread_id).get(PREFERENCES_KEY, {})
        return UserPreferences.model_validate(raw)

    async def run(self, thread_id: str, message: str, model: Optional[str] = None) -> MemoryOutput:
        console.rule("Memory Agent")
        state = self._store.for_thread(thread_id)

        existing_messages = await self.get_messages(thread_id)
        preferences = await self.get_preferences(thread_id)
        console.info(f"Loaded {len(existing_messages)} messages for thread '{thread_id}'.")

        llm_messages = [Message(role="system", content=build_system_prompt(existing_messages, preferences))]
        llm_messages.extend(
            Message(role=item.role, content=item.content) for item in existing_messages[-CONTEXT_MESSAGES:]
        )
        llm_messages.append(Message(role="user", content=message))

        completion = await self._llm.complete(messages=llm_messages, model=model)
        response = completion.message.content or NO_RESPONSE_MESSAGE

        await state.push(MESSAGES_KEY, ChatMessage(role="user", content=message, timestamp=_now()).model_dump(), MAX_MESSAGES)
        await state.push(MESSAGES_KEY, ChatMessage(role="assistant", content=response, timestamp=_now()).model_dump(), MAX_MESSAGES)

        updated_preferences = extract_preferences(message, preferences)
        if updated_preferences != preferences:
            await state.set(PREFERENCES_KEY, updated_preferences.model_dump(exclude_none=True))
            console.info(f"Updated user preferences: {updated_preferences.model_dump(exclude_none=True)}")

        message_count = len(await self.get_messages(thread_id))
        console.success(f"Memory agent replied ({len(response)} chars, {message_count} messages stored).")
        return MemoryOutput(
            response=response,
            message_count=message_count,
            thread_id=thread_id,
            preferences=None if updated_preferences.is_empty() else updated_preferences,
        )

    async def clear(self, thread_id: str) -> None:
        state = self._store.for_thread(thread_id)
        await state.delete(MESSAGES_KEY)
        await state.delete(PREFERENCES_KEY)
