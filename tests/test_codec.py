import pytest

from authoring.wizard import (
    DEFAULT_CATALOG,
    AtConfigure,
    CompatibilityCatalog,
    IncompleteSelection,
    InvalidCombination,
    ItemCategory,
    MalformedTypeId,
    Modality,
    ModalityPairs,
    QuestionCategory,
    SelectionState,
    StaleCombination,
    TypeIdentifierCodec,
    UnknownType,
    decode,
    encode,
)


def test_encode_content_is_content_type() -> None:
    state = SelectionState(category=ItemCategory.CONTENT, content_type="content_sentences")
    assert encode(state) == "content_sentences"


def test_encode_question() -> None:
    state = SelectionState(
        category=ItemCategory.QUESTION,
        question_category=QuestionCategory.MATCHING,
        question_modality=Modality.AUDIO,
        answer_modality=Modality.IMAGE,
    )
    assert encode(state) == "question_matching_audio_image"


@pytest.mark.parametrize(
    "state",
    [
        SelectionState(),
        SelectionState(category=ItemCategory.CONTENT),
        SelectionState(category=ItemCategory.QUESTION),
        SelectionState(
            category=ItemCategory.QUESTION,
            question_category=QuestionCategory.SELECTION,
            question_modality=Modality.TEXT,
        ),
    ],
)
def test_encode_incomplete(state: SelectionState) -> None:
    with pytest.raises(IncompleteSelection):
        encode(state)


def test_encode_rejects_image_to_image() -> None:
    state = SelectionState(
        category=ItemCategory.QUESTION,
        question_category=QuestionCategory.SELECTION,
        question_modality=Modality.IMAGE,
        answer_modality=Modality.IMAGE,
    )
    with pytest.raises(InvalidCombination):
        encode(state)


def test_decode_content_word_definition() -> None:
    state = decode("content_word-definition")
    assert isinstance(state, AtConfigure)
    selection = state.selection()
    assert selection.category == ItemCategory.CONTENT
    assert selection.content_type == "content_word-definition"
    assert selection.resolved_type_id == "content_word-definition"


def test_decode_question_matching_audio_text() -> None:
    state = decode("question_matching_audio_text")
    assert isinstance(state, AtConfigure)
    selection = state.selection()
    assert selection.category == ItemCategory.QUESTION
    assert selection.question_category == QuestionCategory.MATCHING
    assert selection.question_modality == Modality.AUDIO
    assert selection.answer_modality == Modality.TEXT


def test_decode_unknown_prefix() -> None:
    with pytest.raises(UnknownType) as exc_info:
        decode("bogus_type")
    assert exc_info.value.type_id == "bogus_type"
    assert exc_info.value.reason == "unknown_type"


@pytest.mark.parametrize(
    "type_id",
    [
        "question_fill_text",
        "question_",
        "question_selection_text_text_extra",
        "question_essay_text_text",
        "question_selection_video_text",
        "question_Selection_text_text",
        "content_",
    ],
)
def test_decode_malformed(type_id: str) -> None:
    with pytest.raises(MalformedTypeId):
        decode(type_id)


@pytest.mark.parametrize("type_id", DEFAULT_CATALOG.type_ids())
def test_encode_decode_round_trip(type_id: str) -> None:
    assert encode(decode(type_id).selection()) == type_id


def test_permissive_decode_keeps_combination_the_catalog_no_longer_offers() -> None:
    # Selection questions used to allow audio prompts; persisted items stay editable.
    tightened = CompatibilityCatalog(
        table={
            QuestionCategory.SELECTION: ModalityPairs(
                question=(Modality.TEXT,), answer=(Modality.TEXT,)
            )
        }
    )
    codec = TypeIdentifierCodec(tightened)
    state = codec.decode("question_selection_audio_text")
    assert state.type_id == "question_selection_audio_text"


def test_permissive_decode_accepts_image_to_image() -> None:
    state = decode("question_selection_image_image")
    assert state.selection().answer_modality == Modality.IMAGE


def test_image_to_image_does_not_round_trip() -> None:
    # Decodable for editing, but never re-encoded
    with pytest.raises(InvalidCombination):
        encode(decode("question_selection_image_image").selection())


def test_strict_decode_rejects_stale_combination() -> None:
    codec = TypeIdentifierCodec(DEFAULT_CATALOG, strict=True)
    with pytest.raises(StaleCombination) as exc_info:
        codec.decode("question_selection_image_image")
    assert exc_info.value.reason == "stale_combination"

    with pytest.raises(StaleCombination):
        codec.decode("content_word-definition")

    assert codec.decode("question_selection_image_text").type_id == "question_selection_image_text"
    assert codec.decode("content_sentences").type_id == "content_sentences"
