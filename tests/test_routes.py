def start(client, **body) -> dict:
    response = client.post("/api/wizard/sessions", json=body)
    assert response.status_code == 200, response.text
    return response.json()


def send(client, session_id: str, event: str, value: str | None = None):
    return client.post(
        f"/api/wizard/sessions/{session_id}/events", json={"event": event, "value": value}
    )


def test_health(client) -> None:
    assert client.get("/api/health").json() == {"status": "ok"}


def test_catalog(client) -> None:
    data = client.get("/api/catalog").json()
    assert [c["value"] for c in data["categories"]] == ["content", "question"]
    assert [c["value"] for c in data["content_types"]] == [
        "content_sentences",
        "content_word_definition",
    ]
    fill = next(qc for qc in data["question_categories"] if qc["value"] == "fill")
    assert fill["single_combination"] is True
    assert fill["legal_pairs"] == [["text", "text"]]
    assert "question_selection_image_image" not in data["type_ids"]


def test_create_flow_and_submit(client) -> None:
    session = start(client)
    assert session["mode"] == "create"
    assert session["step"] == "category"
    session_id = session["session_id"]

    assert send(client, session_id, "choose_category", "question").status_code == 200
    data = send(client, session_id, "choose_question_category", "selection").json()
    assert data["step"] == "modality"
    assert data["options"]["question_modality"] == ["text", "audio", "image"]

    send(client, session_id, "choose_question_modality", "image")
    data = send(client, session_id, "choose_answer_modality", "text").json()
    assert data["is_complete"] is True
    assert data["selection"]["resolved_type_id"] == "question_selection_image_text"

    form = client.get(f"/api/wizard/sessions/{session_id}/form").json()
    assert form["form_key"] == "SelectionImageTextForm"
    assert "image" in form["fields"]
    assert form["initial_values"] == {}

    response = client.post(
        f"/api/wizard/sessions/{session_id}/submit",
        json={"lesson_id": 1, "payload": {"image": "cat.png"}, "hsk_level": 1},
    )
    assert response.status_code == 200, response.text
    item = response.json()
    assert item["type_id"] == "question_selection_image_text"
    assert item["item_type"] == "question"
    assert item["data"] == {"image": "cat.png"}
    assert item["order_index"] == 0

    # Submitting ends the session
    assert client.get(f"/api/wizard/sessions/{session_id}").status_code == 404

    listing = client.get("/api/lessons/1/items").json()
    assert listing["total"] == 1
    assert listing["items"][0]["id"] == item["id"]


def test_invalid_event_is_rejected(client) -> None:
    session_id = start(client)["session_id"]
    response = send(client, session_id, "choose_content_type", "content_sentences")
    assert response.status_code == 400

    send(client, session_id, "choose_category", "question")
    send(client, session_id, "choose_question_category", "selection")
    send(client, session_id, "choose_question_modality", "image")
    response = send(client, session_id, "choose_answer_modality", "image")
    assert response.status_code == 400

    data = client.get(f"/api/wizard/sessions/{session_id}").json()
    assert data["selection"]["question_modality"] == "image"
    assert data["selection"]["answer_modality"] is None


def test_missing_event_value(client) -> None:
    session_id = start(client)["session_id"]
    assert send(client, session_id, "choose_category").status_code == 400


def test_back_and_reset(client) -> None:
    session_id = start(client)["session_id"]
    send(client, session_id, "choose_category", "question")
    data = send(client, session_id, "choose_question_category", "fill").json()
    assert data["step"] == "configure"
    assert [s["kind"] for s in data["steps"]] == ["category", "question_category", "configure"]

    data = send(client, session_id, "back").json()
    assert data["step"] == "question_category"

    data = send(client, session_id, "reset").json()
    assert data["step"] == "category"
    assert data["selection"]["category"] is None


def test_edit_by_type_id(client) -> None:
    data = start(client, type_id="question_matching_audio_text")
    assert data["mode"] == "edit"
    assert data["step"] == "configure"
    assert data["selection"]["question_modality"] == "audio"


def test_edit_unknown_type(client) -> None:
    response = client.post("/api/wizard/sessions", json={"type_id": "bogus_type"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["reason"] == "unknown_type"
    assert detail["type_id"] == "bogus_type"
    assert detail["message"] == "Could not recognize this item's type"


def test_edit_malformed_type_via_event(client) -> None:
    session_id = start(client)["session_id"]
    response = send(client, session_id, "load_for_edit", "question_fill_text")
    assert response.status_code == 422
    assert response.json()["detail"]["reason"] == "malformed"


def test_edit_item_prefills_then_clears_on_type_change(client) -> None:
    session_id = start(client, type_id="question_selection_text_text")["session_id"]
    item = client.post(
        f"/api/wizard/sessions/{session_id}/submit",
        json={"lesson_id": 2, "payload": {"question": "你好吗?"}},
    ).json()

    session_id = start(client, item_id=item["id"])["session_id"]
    form = client.get(f"/api/wizard/sessions/{session_id}/form").json()
    assert form["initial_values"] == {"question": "你好吗?"}

    send(client, session_id, "back")
    send(client, session_id, "choose_question_modality", "text")
    send(client, session_id, "choose_answer_modality", "image")
    form = client.get(f"/api/wizard/sessions/{session_id}/form").json()
    assert form["type_id"] == "question_selection_text_image"
    assert form["initial_values"] == {}

    updated = client.post(
        f"/api/wizard/sessions/{session_id}/submit",
        json={"lesson_id": 2, "payload": {"question": "new"}},
    ).json()
    assert updated["id"] == item["id"]
    assert updated["type_id"] == "question_selection_text_image"


def test_reset_edit_session_cannot_load_another_type(client) -> None:
    session_id = start(client, type_id="question_selection_text_text")["session_id"]
    item = client.post(
        f"/api/wizard/sessions/{session_id}/submit",
        json={"lesson_id": 2, "payload": {"question": "Q", "options": ["a"]}},
    ).json()

    session_id = start(client, item_id=item["id"])["session_id"]
    assert send(client, session_id, "reset").status_code == 200
    response = send(client, session_id, "load_for_edit", "question_fill_text_text")
    assert response.status_code == 400

    data = client.get(f"/api/wizard/sessions/{session_id}").json()
    assert data["step"] == "category"
    assert client.get(f"/api/wizard/sessions/{session_id}/form").status_code == 409


def test_start_with_type_and_item_rejected(client) -> None:
    response = client.post(
        "/api/wizard/sessions", json={"type_id": "content_sentences", "item_id": 1}
    )
    assert response.status_code == 422


def test_edit_missing_item(client) -> None:
    response = client.post("/api/wizard/sessions", json={"item_id": 999})
    assert response.status_code == 404


def test_form_and_submit_before_resolution(client) -> None:
    session_id = start(client)["session_id"]
    assert client.get(f"/api/wizard/sessions/{session_id}/form").status_code == 409
    response = client.post(
        f"/api/wizard/sessions/{session_id}/submit", json={"lesson_id": 1, "payload": {}}
    )
    assert response.status_code == 409


def test_form_for_type_without_form(client) -> None:
    session_id = start(client, type_id="question_selection_image_image")["session_id"]
    assert client.get(f"/api/wizard/sessions/{session_id}/form").status_code == 404


def test_cancel_session(client) -> None:
    session_id = start(client)["session_id"]
    response = client.delete(f"/api/wizard/sessions/{session_id}")
    assert response.json() == {"status": "cancelled", "session_id": session_id}
    assert client.delete(f"/api/wizard/sessions/{session_id}").status_code == 404
    assert send(client, session_id, "back").status_code == 404


def test_item_endpoints(client) -> None:
    session_id = start(client, type_id="content_sentences")["session_id"]
    item = client.post(
        f"/api/wizard/sessions/{session_id}/submit",
        json={"lesson_id": 4, "payload": {}, "is_active": False},
    ).json()

    assert client.get("/api/lessons/4/items").json()["total"] == 0
    assert client.get("/api/lessons/4/items?include_inactive=true").json()["total"] == 1
    assert client.get(f"/api/items/{item['id']}").json()["type_id"] == "content_sentences"

    assert client.delete(f"/api/items/{item['id']}").json() == {"status": "deleted", "id": item["id"]}
    assert client.get(f"/api/items/{item['id']}").status_code == 404
    assert client.delete(f"/api/items/{item['id']}").status_code == 404
