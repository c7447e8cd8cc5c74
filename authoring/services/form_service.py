"""Selection of the payload form for a resolved item type."""
from __future__ import annotations

from dataclasses import dataclass

from authoring.wizard import SelectionState

# Payload fields edited by each form, keyed by type identifier
FORM_FIELDS: dict[str, tuple[str, ...]] = {
    "content_word_definition": (
        "chinese_text", "pinyin", "speech", "translation", "audio_url", "picture_url",
    ),
    "content_sentences": (
        "chinese_text", "pinyin", "explaination", "additional_info", "audio_url", "picture_url",
    ),
    "question_selection_text_text": (
        "instruction", "question", "options", "correctAnswer", "explanation",
    ),
    "question_selection_text_image": (
        "instruction", "question", "options", "correctAnswer", "explanation",
    ),
    "question_selection_audio_text": (
        "instruction", "audio", "audio_url", "audio_transcript_chinese",
        "audio_transcript_pinyin", "audio_transcript_translation",
        "options", "correctAnswer", "explanation",
    ),
    "question_selection_audio_image": (
        "instruction", "audio", "audio_url", "audio_transcript_chinese",
        "audio_transcript_pinyin", "audio_transcript_translation",
        "options", "correctAnswer", "explanation",
    ),
    "question_selection_image_text": (
        "instruction", "image", "options", "correctAnswer", "explanation",
    ),
    "question_matching_text_text": (
        "instruction", "leftColumn", "rightColumn", "correctMatches", "explanation",
    ),
    "question_matching_text_image": (
        "instruction", "leftColumn", "rightColumn", "correctMatches", "explanation",
    ),
    "question_matching_audio_text": (
        "instruction", "leftColumn", "rightColumn", "correctMatches", "explanation",
    ),
    "question_matching_audio_image": (
        "instruction", "leftColumn", "rightColumn", "correctMatches", "explanation",
    ),
    "question_fill_text_text": (
        "instruction", "sentence", "pinyin", "vietnamese", "optionBank", "blanks", "explanation",
    ),
    "question_bool_audio_text": (
        "instruction", "audio", "transcript", "pinyin", "english", "correctAnswer", "explanation",
    ),
}


class UnsupportedForm(LookupError):
    """No payload form is registered for the type identifier."""


@dataclass(frozen=True)
class FormMount:
    form_key: str
    type_id: str
    category: str
    fields: tuple[str, ...]
    initial_values: dict[str, object]


def form_key_for(type_id: str) -> str:
    """``question_selection_text_text`` -> ``SelectionTextTextForm``."""
    segments = type_id.split("_")[1:]
    return "".join(segment.capitalize() for segment in segments) + "Form"


def select_form(
    selection: SelectionState,
    persisted_payload: dict[str, object] | None = None,
    original_type_id: str | None = None,
) -> FormMount:
    """Pick the form for a resolved selection.

    A persisted payload is only handed back while the item keeps the type it
    was saved with; after a type change the form starts empty.
    """
    type_id = selection.resolved_type_id
    if type_id is None:
        raise UnsupportedForm("Item type is not resolved")
    fields = FORM_FIELDS.get(type_id)
    if fields is None:
        raise UnsupportedForm(f"No form is registered for {type_id!r}")

    initial_values: dict[str, object] = {}
    if persisted_payload and original_type_id == type_id:
        initial_values = dict(persisted_payload)

    return FormMount(
        form_key=form_key_for(type_id),
        type_id=type_id,
        category=selection.category.value,
        fields=fields,
        initial_values=initial_values,
    )
