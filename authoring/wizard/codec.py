"""Encoding and decoding of canonical item type identifiers.

Content identifiers are the content type itself (``content_sentences``).
Question identifiers are ``question_{category}_{question}_{answer}``, every
segment lower-case.
"""
from __future__ import annotations

from authoring.wizard.catalog import (
    CONTENT_PREFIX,
    DEFAULT_CATALOG,
    QUESTION_PREFIX,
    CompatibilityCatalog,
    ItemCategory,
    Modality,
    QuestionCategory,
)
from authoring.wizard.errors import (
    IncompleteSelection,
    InvalidCombination,
    MalformedTypeId,
    StaleCombination,
    UnknownType,
)
from authoring.wizard.state import (
    AtConfigure,
    ContentSelection,
    QuestionSelection,
    SelectionState,
)

QUESTION_SEGMENTS = 4


class TypeIdentifierCodec:
    """Turns selections into identifiers and back.

    ``strict`` controls how persisted identifiers are trusted. The default
    decoder accepts any well-formed identifier even if the catalog no longer
    offers it, so items created under older rules stay editable. A strict
    decoder re-validates against the catalog and raises ``StaleCombination``.
    """

    def __init__(self, catalog: CompatibilityCatalog = DEFAULT_CATALOG, strict: bool = False) -> None:
        self.catalog = catalog
        self.strict = strict

    def encode(self, state: SelectionState) -> str:
        if state.category is None:
            raise IncompleteSelection("Item category is not selected")

        if state.category == ItemCategory.CONTENT:
            if not state.content_type:
                raise IncompleteSelection("Content type is not selected")
            return state.content_type

        qc = state.question_category
        qm = state.question_modality
        am = state.answer_modality
        if qc is None or qm is None or am is None:
            raise IncompleteSelection("Question category and both modalities are required")
        if not self.catalog.is_pair_allowed(qc, qm, am):
            raise InvalidCombination(
                f"{qm.value} -> {am.value} is not allowed for {qc.value} questions"
            )
        return f"{QUESTION_PREFIX}{qc.value}_{qm.value}_{am.value}"

    def decode(self, type_id: str) -> AtConfigure:
        if type_id.startswith(CONTENT_PREFIX):
            return self._decode_content(type_id)
        if type_id.startswith(QUESTION_PREFIX):
            return self._decode_question(type_id)
        raise UnknownType(type_id, f"Unrecognized item type: {type_id!r}")

    def _decode_content(self, type_id: str) -> AtConfigure:
        if type_id == CONTENT_PREFIX:
            raise MalformedTypeId(type_id, "Content type name is empty")
        if self.strict and type_id not in self.catalog.content_types():
            raise StaleCombination(type_id, f"Content type {type_id!r} is no longer offered")
        return AtConfigure(resolved=ContentSelection(content_type=type_id), type_id=type_id)

    def _decode_question(self, type_id: str) -> AtConfigure:
        parts = type_id.split("_")
        # Trailing segments would be lost on re-encoding, so they are rejected too.
        if len(parts) != QUESTION_SEGMENTS:
            raise MalformedTypeId(
                type_id,
                f"Question type needs {QUESTION_SEGMENTS} segments, got {len(parts)}",
            )
        try:
            qc = QuestionCategory(parts[1])
            qm = Modality(parts[2])
            am = Modality(parts[3])
        except ValueError:
            raise MalformedTypeId(type_id, f"Unrecognized segment in {type_id!r}") from None

        if self.strict and not self.catalog.is_pair_allowed(qc, qm, am):
            raise StaleCombination(
                type_id, f"{qm.value} -> {am.value} is no longer allowed for {qc.value} questions"
            )
        return AtConfigure(
            resolved=QuestionSelection(question_category=qc, question_modality=qm, answer_modality=am),
            type_id=type_id,
        )


DEFAULT_CODEC = TypeIdentifierCodec()


def encode(state: SelectionState) -> str:
    return DEFAULT_CODEC.encode(state)


def decode(type_id: str) -> AtConfigure:
    return DEFAULT_CODEC.decode(type_id)
