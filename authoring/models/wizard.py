"""Wizard-related Pydantic models."""
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class WizardEventName(str, Enum):
    """Events accepted by a wizard session."""

    CHOOSE_CATEGORY = "choose_category"
    CHOOSE_CONTENT_TYPE = "choose_content_type"
    CHOOSE_QUESTION_CATEGORY = "choose_question_category"
    CHOOSE_QUESTION_MODALITY = "choose_question_modality"
    CHOOSE_ANSWER_MODALITY = "choose_answer_modality"
    BACK = "back"
    RESET = "reset"
    LOAD_FOR_EDIT = "load_for_edit"


class SessionStartRequest(BaseModel):
    """Start a wizard session. Empty body means create mode; at most one of
    ``type_id`` and ``item_id`` may be given."""

    type_id: str | None = Field(None, min_length=1)
    item_id: int | None = None


class WizardEventRequest(BaseModel):
    """Single user choice, back or reset."""

    event: WizardEventName
    value: str | None = None


class StepResponse(BaseModel):
    kind: str
    title: str
    description: str


class SelectionResponse(BaseModel):
    category: str | None = None
    content_type: str | None = None
    question_category: str | None = None
    question_modality: str | None = None
    answer_modality: str | None = None
    resolved_type_id: str | None = None


class WizardSessionResponse(BaseModel):
    """Current wizard state with the steps to render."""

    session_id: str
    mode: str
    item_id: int | None = None
    step: str
    current_step_index: int
    steps: list[StepResponse]
    selection: SelectionResponse
    options: dict[str, list[str]]
    is_complete: bool


class FormMountResponse(BaseModel):
    """Payload form selected for a resolved type."""

    form_key: str
    type_id: str
    category: str
    fields: list[str]
    selection: SelectionResponse
    initial_values: dict[str, Any]


class WizardSubmitRequest(BaseModel):
    """Item payload entered on the configure step."""

    lesson_id: int = Field(..., ge=1)
    payload: dict[str, Any]
    title: str | None = None
    description: str | None = None
    hsk_level: int | None = Field(None, ge=1, le=9)
    order_index: int | None = Field(None, ge=0)
    is_active: bool = True
