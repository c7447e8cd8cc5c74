"""Catalog Pydantic models."""
from pydantic import BaseModel


class ChoiceResponse(BaseModel):
    value: str
    label: str


class QuestionCategoryResponse(BaseModel):
    value: str
    label: str
    question_modalities: list[ChoiceResponse]
    answer_modalities: list[ChoiceResponse]
    legal_pairs: list[tuple[str, str]]
    single_combination: bool


class CatalogResponse(BaseModel):
    """Everything an authoring UI needs to render the wizard's cards."""

    categories: list[ChoiceResponse]
    content_types: list[ChoiceResponse]
    question_categories: list[QuestionCategoryResponse]
    type_ids: list[str]
