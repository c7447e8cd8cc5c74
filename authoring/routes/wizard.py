"""Type-selection wizard endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session as DbSession

from authoring.database import get_db
from authoring.models.items import LessonItemResponse
from authoring.models.wizard import (
    FormMountResponse,
    SessionStartRequest,
    WizardEventRequest,
    WizardSessionResponse,
    WizardSubmitRequest,
)
from authoring.services import form_service, item_service, wizard_service
from authoring.services.item_service import PersistenceError
from authoring.wizard import DecodeError, WizardError

router = APIRouter(prefix="/api/wizard/sessions", tags=["wizard"])

UNRECOGNIZED_TYPE_MESSAGE = "Could not recognize this item's type"


def _decode_failure(exc: DecodeError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={
            "message": UNRECOGNIZED_TYPE_MESSAGE,
            "reason": exc.reason,
            "type_id": exc.type_id,
        },
    )


def _load_session(session_id: str) -> wizard_service.WizardSession:
    session = wizard_service.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return session


@router.post("", response_model=WizardSessionResponse)
def start_session(
    payload: SessionStartRequest,
    db: Annotated[DbSession, Depends(get_db)],
) -> WizardSessionResponse:
    """Open a wizard in create mode, or in edit mode for a type or an item."""
    if payload.item_id is not None and payload.type_id is not None:
        raise HTTPException(status_code=422, detail="Send either type_id or item_id, not both")
    if payload.item_id is not None:
        item = item_service.get_item(db, payload.item_id)
        if item is None:
            raise HTTPException(status_code=404, detail="Item not found")
        type_id = item.type_id
        persisted = item_service.item_payload(item)
    elif payload.type_id is not None:
        type_id = payload.type_id
        persisted = None
    else:
        session = wizard_service.start_create()
        return WizardSessionResponse(**wizard_service.describe(session))

    try:
        session = wizard_service.start_edit(type_id, item_id=payload.item_id, payload=persisted)
    except DecodeError as e:
        raise _decode_failure(e)
    return WizardSessionResponse(**wizard_service.describe(session))


@router.get("/{session_id}", response_model=WizardSessionResponse)
def get_session(session_id: str) -> WizardSessionResponse:
    """Current state of a wizard session."""
    session = _load_session(session_id)
    return WizardSessionResponse(**wizard_service.describe(session))


@router.post("/{session_id}/events", response_model=WizardSessionResponse)
def apply_event(session_id: str, payload: WizardEventRequest) -> WizardSessionResponse:
    """Apply a choice, back or reset event."""
    session = _load_session(session_id)
    try:
        event = wizard_service.build_event(payload.event, payload.value)
        wizard_service.apply_event(session, event)
    except DecodeError as e:
        raise _decode_failure(e)
    except WizardError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return WizardSessionResponse(**wizard_service.describe(session))


@router.delete("/{session_id}")
def cancel_session(session_id: str) -> dict[str, object]:
    """Cancel a session and drop its selections."""
    if not wizard_service.end_session(session_id):
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return {"status": "cancelled", "session_id": session_id}


@router.get("/{session_id}/form", response_model=FormMountResponse)
def get_form(session_id: str) -> FormMountResponse:
    """Payload form for the resolved type, prefilled in edit mode."""
    session = _load_session(session_id)
    try:
        selection = wizard_service.handoff(session)
    except WizardError as e:
        raise HTTPException(status_code=409, detail=str(e))
    try:
        mount = form_service.select_form(
            selection, session.persisted_payload, session.original_type_id
        )
    except form_service.UnsupportedForm as e:
        raise HTTPException(status_code=404, detail=str(e))
    return FormMountResponse(
        form_key=mount.form_key,
        type_id=mount.type_id,
        category=mount.category,
        fields=list(mount.fields),
        selection=selection.to_dict(),
        initial_values=mount.initial_values,
    )


@router.post("/{session_id}/submit", response_model=LessonItemResponse)
def submit_session(
    session_id: str,
    payload: WizardSubmitRequest,
    db: Annotated[DbSession, Depends(get_db)],
) -> LessonItemResponse:
    """Persist the item with its resolved type and end the session."""
    session = _load_session(session_id)
    try:
        selection = wizard_service.handoff(session)
    except WizardError as e:
        raise HTTPException(status_code=409, detail=str(e))

    try:
        item = item_service.save_item(
            db,
            selection,
            payload.payload,
            lesson_id=payload.lesson_id,
            item_id=session.item_id,
            order_index=payload.order_index,
            title=payload.title,
            description=payload.description,
            hsk_level=payload.hsk_level,
            is_active=payload.is_active,
        )
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))

    wizard_service.end_session(session_id)
    return LessonItemResponse(**item_service.item_to_dict(item))
