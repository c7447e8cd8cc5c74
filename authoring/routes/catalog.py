"""Catalog endpoint."""
from fastapi import APIRouter

from authoring.models.catalog import (
    CatalogResponse,
    ChoiceResponse,
    QuestionCategoryResponse,
)
from authoring.wizard import DEFAULT_CATALOG, ItemCategory
from authoring.wizard.catalog import (
    CATEGORY_LABELS,
    CONTENT_TYPE_LABELS,
    MODALITY_LABELS,
    QUESTION_CATEGORY_LABELS,
)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def _modality_choices(modalities) -> list[ChoiceResponse]:
    return [ChoiceResponse(value=m.value, label=MODALITY_LABELS[m]) for m in modalities]


@router.get("", response_model=CatalogResponse)
def get_catalog() -> CatalogResponse:
    """Legal categories, content types and question modality pairs."""
    catalog = DEFAULT_CATALOG
    question_categories = []
    for qc in catalog.question_categories():
        pairs = catalog.modality_pairs(qc)
        question_categories.append(
            QuestionCategoryResponse(
                value=qc.value,
                label=QUESTION_CATEGORY_LABELS.get(qc, qc.value),
                question_modalities=_modality_choices(pairs.question),
                answer_modalities=_modality_choices(pairs.answer),
                legal_pairs=[(qm.value, am.value) for qm, am in catalog.legal_pairs(qc)],
                single_combination=catalog.has_single_combination(qc),
            )
        )

    return CatalogResponse(
        categories=[
            ChoiceResponse(value=c.value, label=CATEGORY_LABELS[c]) for c in ItemCategory
        ],
        content_types=[
            ChoiceResponse(value=t, label=CONTENT_TYPE_LABELS.get(t, t))
            for t in catalog.content_types()
        ],
        question_categories=question_categories,
        type_ids=catalog.type_ids(),
    )
