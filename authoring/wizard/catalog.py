"""Static catalog of legal item type combinations."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from itertools import product


CONTENT_PREFIX = "content_"
QUESTION_PREFIX = "question_"

CONTENT_SENTENCES = "content_sentences"
CONTENT_WORD_DEFINITION = "content_word_definition"


class ItemCategory(str, enum.Enum):
    """Top-level discriminator of a lesson item."""

    CONTENT = "content"
    QUESTION = "question"


class QuestionCategory(str, enum.Enum):
    """Kind of question."""

    SELECTION = "selection"
    MATCHING = "matching"
    FILL = "fill"
    BOOL = "bool"


class Modality(str, enum.Enum):
    """Medium of a question stimulus or of its answer options."""

    TEXT = "text"
    AUDIO = "audio"
    IMAGE = "image"


@dataclass(frozen=True)
class ModalityPairs:
    """Permitted question and answer modalities of one question category."""

    question: tuple[Modality, ...]
    answer: tuple[Modality, ...]


DEFAULT_CONTENT_TYPES: tuple[str, ...] = (CONTENT_SENTENCES, CONTENT_WORD_DEFINITION)

DEFAULT_TABLE: dict[QuestionCategory, ModalityPairs] = {
    QuestionCategory.SELECTION: ModalityPairs(
        question=(Modality.TEXT, Modality.AUDIO, Modality.IMAGE),
        answer=(Modality.TEXT, Modality.IMAGE),
    ),
    QuestionCategory.MATCHING: ModalityPairs(
        question=(Modality.TEXT, Modality.AUDIO),
        answer=(Modality.TEXT, Modality.IMAGE),
    ),
    # Fill only has text -> text
    QuestionCategory.FILL: ModalityPairs(
        question=(Modality.TEXT,),
        answer=(Modality.TEXT,),
    ),
    # Bool only has audio -> text
    QuestionCategory.BOOL: ModalityPairs(
        question=(Modality.AUDIO,),
        answer=(Modality.TEXT,),
    ),
}

CATEGORY_LABELS = {
    ItemCategory.CONTENT: "Content",
    ItemCategory.QUESTION: "Question",
}

CONTENT_TYPE_LABELS = {
    CONTENT_SENTENCES: "Sentences Content",
    CONTENT_WORD_DEFINITION: "Word Definition Content",
}

QUESTION_CATEGORY_LABELS = {
    QuestionCategory.SELECTION: "Selection Questions",
    QuestionCategory.MATCHING: "Matching Questions",
    QuestionCategory.FILL: "Fill in the Blank Questions",
    QuestionCategory.BOOL: "True/False Questions",
}

MODALITY_LABELS = {
    Modality.TEXT: "Text",
    Modality.AUDIO: "Audio",
    Modality.IMAGE: "Image",
}


class CompatibilityCatalog:
    """Read-only lookup of content types and question modality pairs.

    The default instance mirrors the shipped curriculum. A catalog built with
    a narrower table models a later tightening of the rules, which is how
    stale persisted identifiers come about.
    """

    def __init__(
        self,
        content_types: tuple[str, ...] = DEFAULT_CONTENT_TYPES,
        table: dict[QuestionCategory, ModalityPairs] | None = None,
    ) -> None:
        for content_type in content_types:
            if not content_type.startswith(CONTENT_PREFIX) or content_type == CONTENT_PREFIX:
                raise ValueError(f"Content type must be namespaced: {content_type!r}")
        self._content_types = tuple(content_types)
        self._table = dict(DEFAULT_TABLE if table is None else table)

    def content_types(self) -> list[str]:
        return list(self._content_types)

    def question_categories(self) -> list[QuestionCategory]:
        return list(self._table)

    def modality_pairs(self, question_category: QuestionCategory) -> ModalityPairs:
        try:
            return self._table[question_category]
        except KeyError:
            raise ValueError(f"Unknown question category: {question_category!r}") from None

    def is_pair_allowed(
        self,
        question_category: QuestionCategory,
        question_modality: Modality,
        answer_modality: Modality,
    ) -> bool:
        """Apply the category table and the global Image/Image exclusion."""
        pairs = self._table.get(question_category)
        if pairs is None:
            return False
        if question_modality == Modality.IMAGE and answer_modality == Modality.IMAGE:
            return False
        return question_modality in pairs.question and answer_modality in pairs.answer

    def legal_pairs(self, question_category: QuestionCategory) -> list[tuple[Modality, Modality]]:
        pairs = self._table.get(question_category)
        if pairs is None:
            return []
        return [
            (qm, am)
            for qm, am in product(pairs.question, pairs.answer)
            if self.is_pair_allowed(question_category, qm, am)
        ]

    def has_single_combination(self, question_category: QuestionCategory) -> bool:
        return len(self.legal_pairs(question_category)) == 1

    def type_ids(self) -> list[str]:
        """Every identifier this catalog can produce."""
        ids = list(self._content_types)
        for question_category in self._table:
            for qm, am in self.legal_pairs(question_category):
                ids.append(f"{QUESTION_PREFIX}{question_category.value}_{qm.value}_{am.value}")
        return ids


DEFAULT_CATALOG = CompatibilityCatalog()
