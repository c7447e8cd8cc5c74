"""Transition engine for the type-selection wizard.

Every transition is a pure function of ``(state, event)``. A rejected event
raises and leaves the caller's state untouched; an accepted one returns a new
state object.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TypeVar

from authoring.wizard.catalog import (
    DEFAULT_CATALOG,
    CompatibilityCatalog,
    ItemCategory,
    Modality,
    ModalityPairs,
    QuestionCategory,
)
from authoring.wizard.codec import TypeIdentifierCodec
from authoring.wizard.errors import InvalidCombination, InvalidTransition
from authoring.wizard.planner import StepPlanner
from authoring.wizard.state import (
    AtCategory,
    AtConfigure,
    AtContentType,
    AtModality,
    AtQuestionCategory,
    ContentSelection,
    QuestionSelection,
    SelectionState,
    StepKind,
    WizardState,
)

log = logging.getLogger(__name__)

E = TypeVar("E", bound=enum.Enum)


@dataclass(frozen=True)
class ChooseCategory:
    category: ItemCategory


@dataclass(frozen=True)
class ChooseContentType:
    content_type: str


@dataclass(frozen=True)
class ChooseQuestionCategory:
    question_category: QuestionCategory


@dataclass(frozen=True)
class ChooseQuestionModality:
    modality: Modality


@dataclass(frozen=True)
class ChooseAnswerModality:
    modality: Modality


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class LoadForEdit:
    type_id: str


WizardEvent = (
    ChooseCategory
    | ChooseContentType
    | ChooseQuestionCategory
    | ChooseQuestionModality
    | ChooseAnswerModality
    | Back
    | Reset
    | LoadForEdit
)


class TransitionEngine:
    def __init__(
        self,
        catalog: CompatibilityCatalog = DEFAULT_CATALOG,
        codec: TypeIdentifierCodec | None = None,
    ) -> None:
        self.catalog = catalog
        self.codec = codec or TypeIdentifierCodec(catalog)
        self.planner = StepPlanner(catalog)
        self._handlers = {
            ChooseCategory: self._choose_category,
            ChooseContentType: self._choose_content_type,
            ChooseQuestionCategory: self._choose_question_category,
            ChooseQuestionModality: self._choose_question_modality,
            ChooseAnswerModality: self._choose_answer_modality,
            Back: self._back,
            Reset: self._reset,
            LoadForEdit: self._load_for_edit,
        }

    def initial_state(self) -> WizardState:
        return AtCategory()

    def apply(self, state: WizardState, event: WizardEvent) -> WizardState:
        handler = self._handlers.get(type(event))
        if handler is None:
            raise InvalidTransition(f"Unsupported event: {event!r}")
        next_state = handler(state, event)
        log.debug("%s: %s -> %s", type(event).__name__, state.step.value, next_state.step.value)
        return next_state

    def run(self, events: list[WizardEvent], state: WizardState | None = None) -> WizardState:
        """Apply events in order, starting from ``state`` or the initial state."""
        current = self.initial_state() if state is None else state
        for event in events:
            current = self.apply(current, event)
        return current

    # ---- forward transitions ----

    def _choose_category(self, state: WizardState, event: ChooseCategory) -> WizardState:
        self._expect(state, StepKind.CATEGORY, event)
        category = self._coerce(ItemCategory, event.category, "category")
        if category == ItemCategory.CONTENT:
            return AtContentType()
        return AtQuestionCategory()

    def _choose_content_type(self, state: WizardState, event: ChooseContentType) -> WizardState:
        self._expect(state, StepKind.CONTENT_TYPE, event)
        if event.content_type not in self.catalog.content_types():
            raise InvalidTransition(f"Unknown content type: {event.content_type!r}")
        selection = SelectionState(category=ItemCategory.CONTENT, content_type=event.content_type)
        return AtConfigure(
            resolved=ContentSelection(content_type=event.content_type),
            type_id=self.codec.encode(selection),
        )

    def _choose_question_category(
        self, state: WizardState, event: ChooseQuestionCategory
    ) -> WizardState:
        self._expect(state, StepKind.QUESTION_CATEGORY, event)
        qc = self._coerce(QuestionCategory, event.question_category, "question category")
        if qc not in self.catalog.question_categories():
            raise InvalidTransition(f"Question category {qc.value!r} is not offered")

        if self.catalog.has_single_combination(qc):
            qm, am = self.catalog.legal_pairs(qc)[0]
            return self._resolve_question(qc, qm, am)
        return AtModality(question_category=qc)

    def _choose_question_modality(
        self, state: WizardState, event: ChooseQuestionModality
    ) -> WizardState:
        self._expect(state, StepKind.MODALITY, event)
        qm = self._coerce(Modality, event.modality, "question modality")
        qc = state.question_category
        if qm not in self._pairs(qc).question:
            raise InvalidTransition(f"{qm.value} questions are not offered for {qc.value}")

        am = state.answer_modality
        if am is not None and not self.catalog.is_pair_allowed(qc, qm, am):
            # The earlier answer choice is now illegal (e.g. image -> image)
            log.debug("Dropping answer modality %s after choosing %s", am.value, qm.value)
            am = None
        if am is None:
            return AtModality(question_category=qc, question_modality=qm)
        return self._resolve_question(qc, qm, am)

    def _choose_answer_modality(
        self, state: WizardState, event: ChooseAnswerModality
    ) -> WizardState:
        self._expect(state, StepKind.MODALITY, event)
        am = self._coerce(Modality, event.modality, "answer modality")
        qc = state.question_category
        if am not in self._pairs(qc).answer:
            raise InvalidTransition(f"{am.value} answers are not offered for {qc.value}")

        qm = state.question_modality
        if qm is None:
            return AtModality(question_category=qc, answer_modality=am)
        if not self.catalog.is_pair_allowed(qc, qm, am):
            raise InvalidCombination(
                f"{qm.value} -> {am.value} is not allowed for {qc.value} questions"
            )
        return self._resolve_question(qc, qm, am)

    def _resolve_question(
        self, qc: QuestionCategory, qm: Modality, am: Modality
    ) -> AtConfigure:
        selection = SelectionState(
            category=ItemCategory.QUESTION,
            question_category=qc,
            question_modality=qm,
            answer_modality=am,
        )
        return AtConfigure(
            resolved=QuestionSelection(question_category=qc, question_modality=qm, answer_modality=am),
            type_id=self.codec.encode(selection),
        )

    # ---- backward, reset and edit ----

    def _back(self, state: WizardState, event: Back) -> WizardState:
        steps = [step.kind for step in self.planner.plan(state)]
        index = steps.index(state.step)
        if index == 0:
            return AtCategory(started=True)
        return self._rewind(state, steps[index - 1])

    def _rewind(self, state: WizardState, target: StepKind) -> WizardState:
        """Return to ``target`` with its own choice and everything deeper cleared."""
        if target == StepKind.CATEGORY:
            return AtCategory(started=True)
        if target == StepKind.CONTENT_TYPE:
            return AtContentType()
        if target == StepKind.QUESTION_CATEGORY:
            return AtQuestionCategory()
        if target == StepKind.MODALITY:
            return AtModality(question_category=state.selection().question_category)
        raise InvalidTransition(f"Cannot go back to {target.value}")

    def _reset(self, state: WizardState, event: Reset) -> WizardState:
        return AtCategory(started=True)

    def _load_for_edit(self, state: WizardState, event: LoadForEdit) -> WizardState:
        # Only valid as the very first event of a wizard
        if state != self.initial_state():
            raise InvalidTransition("An item can only be loaded into a fresh wizard")
        return self.codec.decode(event.type_id)

    # ---- guards ----

    @staticmethod
    def _expect(state: WizardState, step: StepKind, event: WizardEvent) -> None:
        if state.step != step:
            raise InvalidTransition(
                f"{type(event).__name__} is not accepted at the {state.step.value} step"
            )

    def _pairs(self, qc: QuestionCategory) -> ModalityPairs:
        if qc not in self.catalog.question_categories():
            raise InvalidTransition(f"Question category {qc.value!r} is not offered")
        return self.catalog.modality_pairs(qc)

    @staticmethod
    def _coerce(enum_cls: type[E], value: object, name: str) -> E:
        try:
            return enum_cls(value)
        except ValueError:
            raise InvalidTransition(f"Unknown {name}: {value!r}") from None


DEFAULT_ENGINE = TransitionEngine()


def start_create() -> WizardState:
    """Entry point for a new item."""
    return DEFAULT_ENGINE.initial_state()


def start_edit(type_id: str, engine: TransitionEngine | None = None) -> WizardState:
    """Entry point for an existing item; raises ``DecodeError`` on a bad identifier."""
    engine = engine or DEFAULT_ENGINE
    return engine.apply(engine.initial_state(), LoadForEdit(type_id))
