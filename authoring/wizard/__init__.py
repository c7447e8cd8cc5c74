"""Type-selection wizard for lesson items."""
from authoring.wizard.catalog import (
    DEFAULT_CATALOG,
    CompatibilityCatalog,
    ItemCategory,
    Modality,
    ModalityPairs,
    QuestionCategory,
)
from authoring.wizard.codec import TypeIdentifierCodec, decode, encode
from authoring.wizard.engine import (
    Back,
    ChooseAnswerModality,
    ChooseCategory,
    ChooseContentType,
    ChooseQuestionCategory,
    ChooseQuestionModality,
    LoadForEdit,
    Reset,
    TransitionEngine,
    start_create,
    start_edit,
)
from authoring.wizard.errors import (
    DecodeError,
    EncodeError,
    IncompleteSelection,
    InvalidCombination,
    InvalidTransition,
    MalformedTypeId,
    StaleCombination,
    UnknownType,
    WizardError,
)
from authoring.wizard.planner import Step, StepPlanner
from authoring.wizard.state import (
    AtCategory,
    AtConfigure,
    AtContentType,
    AtModality,
    AtQuestionCategory,
    SelectionState,
    StepKind,
    WizardState,
)

__all__ = [
    "DEFAULT_CATALOG",
    "CompatibilityCatalog",
    "ItemCategory",
    "Modality",
    "ModalityPairs",
    "QuestionCategory",
    "TypeIdentifierCodec",
    "decode",
    "encode",
    "Back",
    "ChooseAnswerModality",
    "ChooseCategory",
    "ChooseContentType",
    "ChooseQuestionCategory",
    "ChooseQuestionModality",
    "LoadForEdit",
    "Reset",
    "TransitionEngine",
    "start_create",
    "start_edit",
    "DecodeError",
    "EncodeError",
    "IncompleteSelection",
    "InvalidCombination",
    "InvalidTransition",
    "MalformedTypeId",
    "StaleCombination",
    "UnknownType",
    "WizardError",
    "Step",
    "StepPlanner",
    "AtCategory",
    "AtConfigure",
    "AtContentType",
    "AtModality",
    "AtQuestionCategory",
    "SelectionState",
    "StepKind",
    "WizardState",
]
