from authoring.wizard import (
    AtCategory,
    AtContentType,
    AtModality,
    AtQuestionCategory,
    Modality,
    QuestionCategory,
    StepKind,
    StepPlanner,
    start_edit,
)

planner = StepPlanner()


def kinds(state) -> list[StepKind]:
    return [step.kind for step in planner.plan(state)]


def test_placeholder_plan_before_category() -> None:
    assert kinds(AtCategory()) == [StepKind.CATEGORY, StepKind.TYPE, StepKind.CONFIGURE]
    assert planner.current_index(AtCategory()) == 0


def test_content_plan() -> None:
    assert kinds(AtContentType()) == [StepKind.CATEGORY, StepKind.CONTENT_TYPE, StepKind.CONFIGURE]
    assert planner.current_index(start_edit("content_sentences")) == 2


def test_question_plan_has_modality_until_category_known() -> None:
    assert kinds(AtQuestionCategory()) == [
        StepKind.CATEGORY,
        StepKind.QUESTION_CATEGORY,
        StepKind.MODALITY,
        StepKind.CONFIGURE,
    ]
    assert planner.current_index(AtModality(QuestionCategory.MATCHING)) == 2


def test_single_combination_plan_drops_modality() -> None:
    state = start_edit("question_bool_audio_text")
    assert kinds(state) == [StepKind.CATEGORY, StepKind.QUESTION_CATEGORY, StepKind.CONFIGURE]
    assert planner.current_index(state) == 2


def test_step_titles() -> None:
    titles = [step.title for step in planner.plan(AtModality(QuestionCategory.SELECTION))]
    assert titles == ["Category", "Question Category", "Question & Answer Types", "Configure"]


def test_options_per_step() -> None:
    assert planner.options(AtCategory()) == {"category": ["content", "question"]}
    assert planner.options(AtContentType()) == {
        "content_type": ["content_sentences", "content_word_definition"]
    }
    assert planner.options(AtQuestionCategory()) == {
        "question_category": ["selection", "matching", "fill", "bool"]
    }
    assert planner.options(start_edit("content_sentences")) == {}


def test_modality_options_filter_answers_by_question() -> None:
    state = AtModality(QuestionCategory.SELECTION)
    assert planner.options(state) == {
        "question_modality": ["text", "audio", "image"],
        "answer_modality": ["text", "image"],
    }
    state = AtModality(QuestionCategory.SELECTION, question_modality=Modality.IMAGE)
    assert planner.options(state)["answer_modality"] == ["text"]
