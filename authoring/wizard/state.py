"""Wizard states.

Each state variant carries exactly the fields that are valid at that point of
the flow, so a selection that skips an earlier choice cannot be built.
``SelectionState`` is the flat, read-only view handed to encoders, planners
and API responses.
"""
from __future__ import annotations

import enum
from dataclasses import asdict, dataclass
from typing import Any, Union

from authoring.wizard.catalog import ItemCategory, Modality, QuestionCategory


class StepKind(str, enum.Enum):
    """Wizard step, also used to name the state sitting on that step."""

    CATEGORY = "category"
    TYPE = "type"  # placeholder while the category is unset
    CONTENT_TYPE = "content_type"
    QUESTION_CATEGORY = "question_category"
    MODALITY = "modality"
    CONFIGURE = "configure"


@dataclass(frozen=True)
class SelectionState:
    category: ItemCategory | None = None
    content_type: str | None = None
    question_category: QuestionCategory | None = None
    question_modality: Modality | None = None
    answer_modality: Modality | None = None
    resolved_type_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        for key, value in payload.items():
            if isinstance(value, enum.Enum):
                payload[key] = value.value
        return payload


@dataclass(frozen=True)
class ContentSelection:
    content_type: str


@dataclass(frozen=True)
class QuestionSelection:
    question_category: QuestionCategory
    question_modality: Modality
    answer_modality: Modality


@dataclass(frozen=True)
class AtCategory:
    """First step. ``started`` is set once any event has been applied, so a
    wizard reached again through Back or Reset is not mistaken for a fresh one.
    """

    step = StepKind.CATEGORY

    started: bool = False

    def selection(self) -> SelectionState:
        return SelectionState()


@dataclass(frozen=True)
class AtContentType:
    step = StepKind.CONTENT_TYPE

    def selection(self) -> SelectionState:
        return SelectionState(category=ItemCategory.CONTENT)


@dataclass(frozen=True)
class AtQuestionCategory:
    step = StepKind.QUESTION_CATEGORY

    def selection(self) -> SelectionState:
        return SelectionState(category=ItemCategory.QUESTION)


@dataclass(frozen=True)
class AtModality:
    step = StepKind.MODALITY

    question_category: QuestionCategory
    question_modality: Modality | None = None
    answer_modality: Modality | None = None

    def selection(self) -> SelectionState:
        return SelectionState(
            category=ItemCategory.QUESTION,
            question_category=self.question_category,
            question_modality=self.question_modality,
            answer_modality=self.answer_modality,
        )


@dataclass(frozen=True)
class AtConfigure:
    step = StepKind.CONFIGURE

    resolved: Union[ContentSelection, QuestionSelection]
    type_id: str

    @property
    def category(self) -> ItemCategory:
        if isinstance(self.resolved, ContentSelection):
            return ItemCategory.CONTENT
        return ItemCategory.QUESTION

    def selection(self) -> SelectionState:
        if isinstance(self.resolved, ContentSelection):
            return SelectionState(
                category=ItemCategory.CONTENT,
                content_type=self.resolved.content_type,
                resolved_type_id=self.type_id,
            )
        return SelectionState(
            category=ItemCategory.QUESTION,
            question_category=self.resolved.question_category,
            question_modality=self.resolved.question_modality,
            answer_modality=self.resolved.answer_modality,
            resolved_type_id=self.type_id,
        )


WizardState = Union[AtCategory, AtContentType, AtQuestionCategory, AtModality, AtConfigure]
