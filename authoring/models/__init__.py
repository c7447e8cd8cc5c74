"""Pydantic models."""
from authoring.models.catalog import (
    CatalogResponse,
    ChoiceResponse,
    QuestionCategoryResponse,
)
from authoring.models.items import LessonItemListResponse, LessonItemResponse
from authoring.models.wizard import (
    FormMountResponse,
    SelectionResponse,
    SessionStartRequest,
    StepResponse,
    WizardEventName,
    WizardEventRequest,
    WizardSessionResponse,
    WizardSubmitRequest,
)

__all__ = [
    "CatalogResponse",
    "ChoiceResponse",
    "QuestionCategoryResponse",
    "LessonItemListResponse",
    "LessonItemResponse",
    "FormMountResponse",
    "SelectionResponse",
    "SessionStartRequest",
    "StepResponse",
    "WizardEventName",
    "WizardEventRequest",
    "WizardSessionResponse",
    "WizardSubmitRequest",
]
