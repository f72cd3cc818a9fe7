import pytest

from schemas.answer_keys import AnswerKey
from schemas.results import ScoredResult, SubjectScore
from schemas.subjects import SubjectConfig
from services.scoring_engine import (
    number_positions,
    rank_and_filter,
    rescore_all,
    score_participant,
    score_subject,
)


def _port(min_score):
    return SubjectConfig(key="port", name="Português", count=2, weight=1.0, min_score=min_score)


PORT_KEY = AnswerKey(answers={"port": ["A", "B"]})


# ==========================================================
# score_subject
# ==========================================================

def test_score_equal_to_min_score_is_not_eliminated():
    result = score_subject({0: "A", 1: "A"}, "port", _port(1.0), PORT_KEY)
    assert result == SubjectScore(hits=1, total=2, score=1.0, eliminated_by_min_score=False)


def test_score_below_min_score_is_eliminated():
    result = score_subject({0: "A", 1: "A"}, "port", _port(2.0), PORT_KEY)
    assert result.score == 1.0
    assert result.eliminated_by_min_score is True


def test_unanswered_never_counts_as_hit():
    """미응답은 정답표 칸이 비어 있어도 정답이 아니다."""
    key = AnswerKey(answers={"port": ["", "B"]})
    result = score_subject({0: "", 1: None}, "port", _port(0.0), key)
    assert result.hits == 0
    assert result.score == 0.0


def test_weight_multiplies_hits():
    subject = SubjectConfig(key="law", name="Direito", count=3, weight=2.5, min_score=0.0)
    key = AnswerKey(answers={"law": ["A", "B", "C"]})
    result = score_subject({0: "A", 1: "B", 2: "D"}, "law", subject, key)
    assert result.hits == 2
    assert result.score == 5.0


@pytest.mark.parametrize("config, key", [
    (None, PORT_KEY),
    (_port(5.0), None),
    (_port(5.0), AnswerKey(answers={"other": ["A"]})),
])
def test_missing_config_or_key_scores_zero(config, key):
    result = score_subject({0: "A", 1: "B"}, "port", config, key)
    assert result == SubjectScore()
    assert result.eliminated_by_min_score is False


def test_short_key_only_scores_available_questions():
    key = AnswerKey(answers={"port": ["A"]})
    result = score_subject({0: "A", 1: "B"}, "port", _port(0.0), key)
    assert result.hits == 1
    assert result.total == 2


# ==========================================================
# score_participant
# ==========================================================

def test_overall_minimum(port_math, port_math_key, make_submission):
    both = make_submission("p1", {"port": {0: "A"}, "math": {0: "C"}})
    port_only = make_submission("p2", {"port": {0: "A"}, "math": {0: "B"}})

    first = score_participant(both, port_math, port_math_key, 2.5)
    assert first.final_score == 3.0
    assert first.eliminated is False
    assert first.score_of("math") == 2.0

    second = score_participant(port_only, port_math, port_math_key, 2.5)
    assert second.final_score == 1.0
    assert second.eliminated is True
    assert not any(s.eliminated_by_min_score for s in second.subject_scores.values())


def test_single_subject_gate_eliminates_regardless_of_total(make_submission):
    subjects = [
        SubjectConfig(key="port", name="Português", count=1, weight=1.0, min_score=1.0),
        SubjectConfig(key="math", name="Matemática", count=4, weight=10.0, min_score=0.0),
    ]
    key = AnswerKey(answers={"port": ["A"], "math": ["A", "B", "C", "D"]})
    sub = make_submission("p1", {"port": {0: "E"}, "math": {0: "A", 1: "B", 2: "C", 3: "D"}})

    result = score_participant(sub, subjects, key, 0.0)
    assert result.final_score == 40.0
    assert result.eliminated is True
    assert result.subject_scores["port"].eliminated_by_min_score is True


def test_participant_without_key_is_eliminated_by_overall_minimum(port_math, make_submission):
    result = score_participant(make_submission("p1", {"port": {0: "A"}}), port_math, None, 1.0)
    assert result.final_score == 0.0
    assert result.eliminated is True


def test_result_copies_identity(port_math, port_math_key, make_submission):
    sub = make_submission("p9", nickname="Zé", category="PcD")
    result = score_participant(sub, port_math, port_math_key, 0.0)
    assert (result.participant_id, result.nickname, result.category.value) == ("p9", "Zé", "PcD")
    assert list(result.subject_scores) == ["port", "math"]


# ==========================================================
# rescore_all
# ==========================================================

def test_rescore_all_is_idempotent_and_keeps_order(port_math, port_math_key, make_submission):
    subs = [
        make_submission("a", {"port": {0: "A"}}),
        make_submission("b", {"math": {0: "C"}}),
        make_submission("c"),
    ]
    first = rescore_all(subs, port_math, port_math_key, 1.5)
    second = rescore_all(subs, port_math, port_math_key, 1.5)

    assert first == second
    assert [r.participant_id for r in first] == ["a", "b", "c"]
    assert [r.eliminated for r in first] == [True, False, True]


def test_rescore_all_reflects_new_key(port_math, make_submission):
    subs = [make_submission("a", {"port": {0: "A"}, "math": {0: "C"}})]
    old = rescore_all(subs, port_math, AnswerKey(answers={"port": ["B"], "math": ["C"]}), 0.0)
    new = rescore_all(subs, port_math, AnswerKey(answers={"port": ["A"], "math": ["C"]}), 0.0)
    assert old[0].final_score == 2.0
    assert new[0].final_score == 3.0


# ==========================================================
# rank_and_filter
# ==========================================================

def _result(pid, score, eliminated=False, nickname=None, category="Ampla", subjects=None):
    return ScoredResult(
        participant_id=pid,
        nickname=nickname or pid,
        category=category,
        final_score=score,
        eliminated=eliminated,
        subject_scores={k: SubjectScore(score=v) for k, v in (subjects or {}).items()},
    )


RESULTS = [
    _result("ana", 50.0, category="Ampla", subjects={"port": 20.0}),
    _result("bruno", 90.0, eliminated=True, category="PP", subjects={"port": 5.0}),
    _result("carla", 60.0, category="PP", subjects={"port": 10.0}),
    _result("Álvaro", 30.0, category="PcD", subjects={"port": 30.0}),
    _result("duda", 10.0, eliminated=True, category="Ampla", subjects={"port": 0.0}),
]


def test_eliminated_always_after_qualifiers():
    for direction in ("asc", "desc"):
        for key in ("final_score", "nickname", "category", "port"):
            ranked = rank_and_filter(RESULTS, sort_key=key, sort_direction=direction)
            flags = [r.eliminated for r in ranked]
            assert flags == sorted(flags), (key, direction)


def test_default_sort_is_final_score_desc():
    ranked = rank_and_filter(RESULTS)
    assert [r.participant_id for r in ranked] == ["carla", "ana", "Álvaro", "bruno", "duda"]


def test_sort_by_subject_score_asc():
    ranked = rank_and_filter(RESULTS, sort_key="port", sort_direction="asc")
    assert [r.participant_id for r in ranked] == ["carla", "ana", "Álvaro", "duda", "bruno"]


def test_sort_by_nickname_uses_locale_order():
    ranked = rank_and_filter(RESULTS, sort_key="nickname", sort_direction="asc")
    assert [r.participant_id for r in ranked] == ["Álvaro", "ana", "carla", "bruno", "duda"]


def test_unknown_sort_key_keeps_input_order():
    ranked = rank_and_filter(RESULTS, sort_key="pos", sort_direction="desc")
    assert [r.participant_id for r in ranked] == ["ana", "carla", "Álvaro", "bruno", "duda"]


def test_category_and_nickname_filters():
    assert [r.participant_id for r in rank_and_filter(RESULTS, category_filter="PP")] == ["carla", "bruno"]
    assert [r.participant_id for r in rank_and_filter(RESULTS, nickname_search="AR")] == ["carla", "Álvaro"]
    assert rank_and_filter(RESULTS, category_filter="PcD", nickname_search="ana") == []
    assert len(rank_and_filter(RESULTS, category_filter="all", nickname_search="")) == 5


def test_invalid_direction_is_rejected():
    with pytest.raises(ValueError):
        rank_and_filter(RESULTS, sort_direction="up")


def test_number_positions():
    ranked = rank_and_filter(RESULTS)
    assert [pos for pos, _ in number_positions(ranked)] == [1, 2, 3, 4, 5]
