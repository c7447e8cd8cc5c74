"""Ordered wizard steps derived from the current state."""
from __future__ import annotations

from dataclasses import dataclass

from authoring.wizard.catalog import (
    DEFAULT_CATALOG,
    CompatibilityCatalog,
    ItemCategory,
)
from authoring.wizard.state import AtModality, StepKind, WizardState


@dataclass(frozen=True)
class Step:
    kind: StepKind
    title: str
    description: str


CATEGORY_STEP = Step(StepKind.CATEGORY, "Category", "Select item category")
TYPE_STEP = Step(StepKind.TYPE, "Type", "Select item type")
CONTENT_TYPE_STEP = Step(StepKind.CONTENT_TYPE, "Type", "Select content type")
QUESTION_CATEGORY_STEP = Step(
    StepKind.QUESTION_CATEGORY, "Question Category", "Select question category"
)
MODALITY_STEP = Step(
    StepKind.MODALITY, "Question & Answer Types", "Select question & answer types"
)
CONFIGURE_STEP = Step(StepKind.CONFIGURE, "Configure", "Fill in the item details")


class StepPlanner:
    """Computes the steps to display. Holds no state of its own."""

    def __init__(self, catalog: CompatibilityCatalog = DEFAULT_CATALOG) -> None:
        self.catalog = catalog

    def plan(self, state: WizardState) -> list[Step]:
        selection = state.selection()

        if selection.category is None:
            # Progress placeholder, recomputed once a category is chosen
            return [CATEGORY_STEP, TYPE_STEP, CONFIGURE_STEP]

        if selection.category == ItemCategory.CONTENT:
            return [CATEGORY_STEP, CONTENT_TYPE_STEP, CONFIGURE_STEP]

        steps = [CATEGORY_STEP, QUESTION_CATEGORY_STEP]
        qc = selection.question_category
        if qc is None or not self.catalog.has_single_combination(qc):
            steps.append(MODALITY_STEP)
        steps.append(CONFIGURE_STEP)
        return steps

    def current_index(self, state: WizardState) -> int:
        kinds = [step.kind for step in self.plan(state)]
        return kinds.index(state.step)

    def options(self, state: WizardState) -> dict[str, list[str]]:
        """Choices offered at the current step, keyed by the field they set."""
        if state.step == StepKind.CATEGORY:
            return {"category": [category.value for category in ItemCategory]}
        if state.step == StepKind.CONTENT_TYPE:
            return {"content_type": self.catalog.content_types()}
        if state.step == StepKind.QUESTION_CATEGORY:
            return {
                "question_category": [qc.value for qc in self.catalog.question_categories()]
            }
        if isinstance(state, AtModality):
            if state.question_category not in self.catalog.question_categories():
                return {"question_modality": [], "answer_modality": []}
            pairs = self.catalog.modality_pairs(state.question_category)
            answers = list(pairs.answer)
            if state.question_modality is not None:
                answers = [
                    am
                    for am in answers
                    if self.catalog.is_pair_allowed(
                        state.question_category, state.question_modality, am
                    )
                ]
            return {
                "question_modality": [qm.value for qm in pairs.question],
                "answer_modality": [am.value for am in answers],
            }
        return {}
