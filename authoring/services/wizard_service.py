"""Service layer for wizard sessions.

Each session owns one wizard state. The registry only maps session ids to
sessions; all state changes go through the transition engine.
"""
from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from authoring import config
from authoring.utils import utc_now
from authoring.wizard import (
    DEFAULT_CATALOG,
    AtConfigure,
    Back,
    ChooseAnswerModality,
    ChooseCategory,
    ChooseContentType,
    ChooseQuestionCategory,
    ChooseQuestionModality,
    InvalidTransition,
    LoadForEdit,
    Reset,
    SelectionState,
    TransitionEngine,
    TypeIdentifierCodec,
    WizardState,
)
from authoring.models.wizard import WizardEventName

logger = logging.getLogger(__name__)

MODE_CREATE = "create"
MODE_EDIT = "edit"

ENGINE = TransitionEngine(
    DEFAULT_CATALOG,
    TypeIdentifierCodec(DEFAULT_CATALOG, strict=config.STRICT_TYPE_DECODE),
)


@dataclass
class WizardSession:
    id: str
    state: WizardState
    mode: str = MODE_CREATE
    item_id: int | None = None
    original_type_id: str | None = None
    persisted_payload: dict[str, object] | None = None
    touched_at: datetime = field(default_factory=utc_now)


_sessions: dict[str, WizardSession] = {}
_lock = threading.Lock()


def _register(session: WizardSession) -> WizardSession:
    with _lock:
        _sessions[session.id] = session
    return session


def start_create() -> WizardSession:
    """Open a wizard for a new item."""
    session = WizardSession(id=uuid.uuid4().hex, state=ENGINE.initial_state())
    logger.info("Wizard session %s started (create)", session.id)
    return _register(session)


def start_edit(
    type_id: str,
    item_id: int | None = None,
    payload: dict[str, object] | None = None,
) -> WizardSession:
    """Open a wizard on an existing item type.

    Raises ``DecodeError`` when the identifier is not recognized; no session
    is created in that case.
    """
    state = ENGINE.apply(ENGINE.initial_state(), LoadForEdit(type_id))
    session = WizardSession(
        id=uuid.uuid4().hex,
        state=state,
        mode=MODE_EDIT,
        item_id=item_id,
        original_type_id=type_id,
        persisted_payload=payload,
    )
    logger.info("Wizard session %s started (edit %s)", session.id, type_id)
    return _register(session)


def get_session(session_id: str) -> WizardSession | None:
    with _lock:
        session = _sessions.get(session_id)
        if session is not None:
            session.touched_at = utc_now()
        return session


def end_session(session_id: str) -> bool:
    """Drop a session (cancel or after submit)."""
    with _lock:
        removed = _sessions.pop(session_id, None)
    if removed is not None:
        logger.info("Wizard session %s ended", session_id)
    return removed is not None


def build_event(name: WizardEventName, value: str | None = None):
    """Translate an API event into an engine event."""
    if name == WizardEventName.BACK:
        return Back()
    if name == WizardEventName.RESET:
        return Reset()

    if value is None or not value.strip():
        raise InvalidTransition(f"{name.value} requires a value")
    value = value.strip()

    if name == WizardEventName.CHOOSE_CATEGORY:
        return ChooseCategory(value)
    if name == WizardEventName.CHOOSE_CONTENT_TYPE:
        return ChooseContentType(value)
    if name == WizardEventName.CHOOSE_QUESTION_CATEGORY:
        return ChooseQuestionCategory(value)
    if name == WizardEventName.CHOOSE_QUESTION_MODALITY:
        return ChooseQuestionModality(value)
    if name == WizardEventName.CHOOSE_ANSWER_MODALITY:
        return ChooseAnswerModality(value)
    return LoadForEdit(value)


def apply_event(session: WizardSession, event) -> WizardSession:
    """Apply an event; on failure the session keeps its previous state."""
    with _lock:
        session.state = ENGINE.apply(session.state, event)
        session.touched_at = utc_now()
        if isinstance(event, LoadForEdit):
            # A type loaded by event belongs to no stored item
            session.mode = MODE_EDIT
            session.original_type_id = event.type_id
            session.item_id = None
            session.persisted_payload = None
    return session


def handoff(session: WizardSession) -> SelectionState:
    """Fields handed to the payload form once the type is resolved."""
    if not isinstance(session.state, AtConfigure):
        raise InvalidTransition(
            f"Item type is not resolved yet (at {session.state.step.value} step)"
        )
    return session.state.selection()


def describe(session: WizardSession) -> dict[str, object]:
    """Session view: steps, current position, selection and offered choices."""
    state = session.state
    steps = ENGINE.planner.plan(state)
    return {
        "session_id": session.id,
        "mode": session.mode,
        "item_id": session.item_id,
        "step": state.step.value,
        "current_step_index": ENGINE.planner.current_index(state),
        "steps": [
            {"kind": step.kind.value, "title": step.title, "description": step.description}
            for step in steps
        ],
        "selection": state.selection().to_dict(),
        "options": ENGINE.planner.options(state),
        "is_complete": isinstance(state, AtConfigure),
    }


def purge_expired_sessions(now: datetime | None = None) -> int:
    """Remove sessions idle for longer than the configured TTL."""
    now = now or utc_now()
    cutoff = now - timedelta(minutes=config.WIZARD_SESSION_TTL_MINUTES)
    with _lock:
        expired = [sid for sid, s in _sessions.items() if s.touched_at < cutoff]
        for sid in expired:
            del _sessions[sid]
    if expired:
        logger.info("Purged %d idle wizard sessions", len(expired))
    return len(expired)


def clear_sessions() -> None:
    with _lock:
        _sessions.clear()
