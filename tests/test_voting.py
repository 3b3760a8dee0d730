import re

from votehub.main import app
from votehub.models import AnswerModel
from votehub.routers.voting import get_answer_action
from votehub.schemas import QuestionView
from votehub.seed import SeedDataset, seed_database
from votehub.voting import CHOICE_FIELD, render_voting_form


RADIO_RE = re.compile(r'<input type="radio" name="([^"]+)" value="([^"]+)"')


def _seed_question(db_session):
    dataset = SeedDataset(
        shareholders=[{"id": "u1", "name": "Alice", "email": "a@x.com", "password": "pw"}],
        questions=[{"id": "q1", "question": "Pick one", "is_active": 1}, {"id": "q2", "question": "Old one", "is_active": 0}],
        choices=[
            {"id": "c1", "question_id": "q1", "choice": "A"},
            {"id": "c2", "question_id": "q1", "choice": "B"},
        ],
    )
    result = seed_database(db_session, dataset)
    assert result.committed


def test_form_renders_one_radio_per_choice_in_one_group():
    question = QuestionView(id="q1", question="Pick one", choices_array=["A", "B"])
    html = render_voting_form(question, "/voting/q1/answers")

    radios = RADIO_RE.findall(html)
    assert radios == [(CHOICE_FIELD, "A"), (CHOICE_FIELD, "B")]
    assert "Pick one" in html
    assert 'action="/voting/q1/answers"' in html
    assert html.count("<button") == 1


def test_form_escapes_choice_text():
    question = QuestionView(id="q1", question="<b>Pick</b>", choices_array=['"quoted"'])
    html = render_voting_form(question, "/voting/q1/answers")

    assert "<b>Pick</b>" not in html
    assert "&#34;quoted&#34;" in html


def test_voting_page_renders_seeded_question(client, db_session):
    _seed_question(db_session)

    r = client.get("/voting/q1", params={"shareholder_id": "u1"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert RADIO_RE.findall(r.text) == [(CHOICE_FIELD, "A"), (CHOICE_FIELD, "B")]
    assert "/voting/q1/answers?shareholder_id=u1" in r.text


def test_voting_page_unknown_question_is_404(client):
    r = client.get("/voting/missing")
    assert r.status_code == 404
    assert r.json()["detail"]["error"]["code"] == "question_not_found"


def test_submit_hands_selected_choice_to_action(client, db_session):
    _seed_question(db_session)
    calls = []

    def fake_action(db, question, choice, shareholder_id):
        calls.append((question.id, question.choices_array, choice, shareholder_id))
        return {"ok": True}

    app.dependency_overrides[get_answer_action] = lambda: fake_action
    try:
        r = client.post("/voting/q1/answers", data={CHOICE_FIELD: "B"})
    finally:
        app.dependency_overrides.pop(get_answer_action, None)

    assert r.status_code == 201
    assert r.json() == {"ok": True}
    assert calls == [("q1", ["A", "B"], "B", None)]


def test_default_action_records_answer(client, db_session):
    _seed_question(db_session)

    r = client.post("/voting/q1/answers", params={"shareholder_id": "u1"}, data={CHOICE_FIELD: "B"})
    assert r.status_code == 201
    body = r.json()
    assert body["sh_id"] == "u1"
    assert body["question_id"] == "q1"
    assert body["choice_id"] == "c2"

    stored = db_session.query(AnswerModel).filter(AnswerModel.id == body["id"]).one()
    assert stored.choice_id == "c2"


def test_default_action_allows_repeat_answers(client, db_session):
    _seed_question(db_session)

    for choice in ("A", "B"):
        r = client.post("/voting/q1/answers", params={"shareholder_id": "u1"}, data={CHOICE_FIELD: choice})
        assert r.status_code == 201

    assert db_session.query(AnswerModel).filter(AnswerModel.sh_id == "u1").count() == 2


def test_default_action_requires_shareholder(client, db_session):
    _seed_question(db_session)

    r = client.post("/voting/q1/answers", data={CHOICE_FIELD: "A"})
    assert r.status_code == 400
    assert r.json()["detail"]["error"]["code"] == "shareholder_required"


def test_default_action_rejects_unknown_choice(client, db_session):
    _seed_question(db_session)

    r = client.post("/voting/q1/answers", params={"shareholder_id": "u1"}, data={CHOICE_FIELD: "Z"})
    assert r.status_code == 404
    assert r.json()["detail"]["error"]["code"] == "choice_not_found"


def test_submit_without_selection_is_validation_error(client, db_session):
    _seed_question(db_session)

    r = client.post("/voting/q1/answers", params={"shareholder_id": "u1"}, data={})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "validation_error"


def test_questions_api_lists_active_questions(client, db_session):
    _seed_question(db_session)

    r = client.get("/api/questions")
    assert r.status_code == 200
    assert r.json() == [{"id": "q1", "question": "Pick one", "is_active": True, "choices_array": ["A", "B"]}]

    r = client.get("/api/questions/q2")
    assert r.status_code == 200
    assert r.json()["is_active"] is False
    assert r.json()["choices_array"] == []


def test_choices_are_listed_in_choice_id_order(client, db_session):
    dataset = SeedDataset(
        questions=[{"id": "q9", "question": "Order?", "is_active": 1}],
        choices=[
            {"id": "z-first", "question_id": "q9", "choice": "A"},
            {"id": "a-second", "question_id": "q9", "choice": "B"},
        ],
    )
    assert seed_database(db_session, dataset).committed

    r = client.get("/api/questions/q9")
    assert r.json()["choices_array"] == ["B", "A"]
