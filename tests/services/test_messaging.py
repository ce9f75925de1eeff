from __future__ import annotations

import pytest

from freelancehub.errors import AccessDeniedError, FormValidationError, NotFoundError
from freelancehub.services import MessagingService


@pytest.fixture
def chat(open_session, store):
    ada = open_session("ada@example.com", "freelancer")
    carl = open_session("carl@example.com", "client")
    return MessagingService(session=ada, store=store), MessagingService(session=carl, store=store), ada, carl


def test_start_conversation_reuses_existing(chat):
    ada_chat, carl_chat, ada, carl = chat

    started = carl_chat.start_conversation(ada.user.id)
    again = ada_chat.start_conversation(carl.user.id)

    assert again.id == started.id
    assert started.includes(ada.user.id) and started.includes(carl.user.id)


def test_cannot_message_yourself(chat):
    ada_chat, _, ada, _ = chat

    with pytest.raises(AccessDeniedError):
        ada_chat.start_conversation(ada.user.id)


def test_send_and_read_messages(chat, store):
    ada_chat, carl_chat, ada, _ = chat
    conversation = carl_chat.start_conversation(ada.user.id)
    store.update("conversations", {"updated_at": "2000-01-01T00:00:00.000000+00:00"}, filters={"id": conversation.id})

    sent = carl_chat.send_message(conversation.id, "  Hello there  ")
    ada_chat.send_message(conversation.id, "Hi Carl")

    messages = ada_chat.messages(conversation.id)
    assert sent.content == "Hello there"
    assert [message.content for message in messages] == ["Hello there", "Hi Carl"]
    assert messages[0].sender.full_name == "Carl Tester"
    bumped = store.select("conversations", filters={"id": conversation.id})[0]["updated_at"]
    assert bumped > "2000-01-01T00:00:00.000000+00:00"


def test_blank_message_is_rejected(chat):
    ada_chat, carl_chat, ada, _ = chat
    conversation = carl_chat.start_conversation(ada.user.id)

    with pytest.raises(FormValidationError) as exc:
        carl_chat.send_message(conversation.id, "   ")
    assert "content" in exc.value.errors


def test_outsiders_cannot_read_or_send(chat, open_session, store):
    _, carl_chat, ada, _ = chat
    conversation = carl_chat.start_conversation(ada.user.id)
    eve_chat = MessagingService(session=open_session("eve@example.com", "client"), store=store)

    with pytest.raises(AccessDeniedError):
        eve_chat.messages(conversation.id)
    with pytest.raises(AccessDeniedError):
        eve_chat.send_message(conversation.id, "let me in")
    with pytest.raises(NotFoundError):
        eve_chat.messages("missing")


def test_conversations_are_listed_newest_first(chat, open_session, store):
    ada_chat, carl_chat, ada, carl = chat
    dora = open_session("dora@example.com", "client")
    older = carl_chat.start_conversation(ada.user.id)
    newer = MessagingService(session=dora, store=store).start_conversation(ada.user.id)
    store.update("conversations", {"updated_at": "2025-01-01T00:00:00.000000+00:00"}, filters={"id": older.id})
    store.update("conversations", {"updated_at": "2025-02-01T00:00:00.000000+00:00"}, filters={"id": newer.id})

    listed = ada_chat.conversations()

    assert [conversation.id for conversation in listed] == [newer.id, older.id]
    assert [conversation.other_user.full_name for conversation in listed] == ["Dora Tester", "Carl Tester"]
    assert [conversation.id for conversation in carl_chat.conversations()] == [older.id]
