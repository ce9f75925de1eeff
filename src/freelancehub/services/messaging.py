"""Two-party conversations between clients and freelancers."""

from __future__ import annotations

import structlog

from ..clock import utc_timestamp
from ..errors import AccessDeniedError, FormValidationError, NotFoundError
from ..schemas import Conversation, ConversationView, Message, MessageView, ProfileSummary
from ..store import RecordStore
from .session import SessionContext


class MessagingService:
    def __init__(self, *, session: SessionContext, store: RecordStore) -> None:
        self._session = session
        self._store = store
        self._logger = structlog.get_logger(__name__)

    def conversations(self) -> list[ConversationView]:
        """Conversations the signed-in user takes part in, most recently active first."""
        user = self._session.require_user()
        rows = [
            *self._store.select("conversations", filters={"participant_1": user.id}),
            *self._store.select("conversations", filters={"participant_2": user.id}),
        ]
        self._session.checkpoint("conversations")
        unique = {row["id"]: row for row in rows}
        ordered = sorted(unique.values(), key=lambda row: row.get("updated_at") or "", reverse=True)

        views = []
        for row in ordered:
            conversation = Conversation.model_validate(row)
            other = self._summary(conversation.other_participant(user.id))
            views.append(ConversationView.model_validate({**row, "other_user": other}))
        return views

    def messages(self, conversation_id: str) -> list[MessageView]:
        self._participating(conversation_id)
        rows = self._store.select(
            "messages",
            filters={"conversation_id": conversation_id},
            order_by="sent_at",
        )
        self._session.checkpoint("messages")
        senders: dict[str, ProfileSummary] = {}
        views = []
        for row in rows:
            sender_id = row["sender_id"]
            if sender_id not in senders:
                senders[sender_id] = self._summary(sender_id)
            views.append(MessageView.model_validate({**row, "sender": senders[sender_id]}))
        return views

    def send_message(self, conversation_id: str, content: str) -> Message:
        text = content.strip()
        if not text:
            raise FormValidationError({"content": "Message cannot be empty"})
        user = self._session.require_user()
        conversation = self._participating(conversation_id)

        row = self._store.insert(
            "messages",
            {"conversation_id": conversation.id, "sender_id": user.id, "content": text},
        )
        self._session.checkpoint("send_message")
        self._store.update("conversations", {"updated_at": utc_timestamp()}, filters={"id": conversation.id})
        self._session.checkpoint("send_message")
        message = Message.model_validate(row)
        self._logger.info("message.sent", conversation_id=conversation.id, message_id=message.id)
        return message

    def start_conversation(self, other_user_id: str) -> Conversation:
        """Return the conversation with ``other_user_id``, creating it on first contact."""
        user = self._session.require_user()
        if other_user_id == user.id:
            raise AccessDeniedError("You cannot start a conversation with yourself")

        for first, second in ((user.id, other_user_id), (other_user_id, user.id)):
            rows = self._store.select("conversations", filters={"participant_1": first, "participant_2": second})
            self._session.checkpoint("start_conversation")
            if rows:
                return Conversation.model_validate(rows[0])

        row = self._store.insert("conversations", {"participant_1": user.id, "participant_2": other_user_id})
        self._session.checkpoint("start_conversation")
        conversation = Conversation.model_validate(row)
        self._logger.info("conversation.started", conversation_id=conversation.id)
        return conversation

    def _participating(self, conversation_id: str) -> Conversation:
        user = self._session.require_user()
        rows = self._store.select("conversations", filters={"id": conversation_id})
        self._session.checkpoint("load_conversation")
        if not rows:
            raise NotFoundError("Conversation not found")
        conversation = Conversation.model_validate(rows[0])
        if not conversation.includes(user.id):
            raise AccessDeniedError("You are not part of this conversation")
        return conversation

    def _summary(self, user_id: str) -> ProfileSummary:
        rows = self._store.select("profiles", filters={"id": user_id})
        return ProfileSummary.model_validate(rows[0]) if rows else ProfileSummary()
