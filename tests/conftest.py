import pytest

from schemas.answer_keys import AnswerKey
from schemas.participants import ParticipantSubmission
from schemas.rankings import RankingDraft
from schemas.subjects import SubjectConfig, SubjectConfigCreate


@pytest.fixture
def port_math():
    """port(1문항, 배점 1) + math(1문항, 배점 2), 과락 없음"""
    return [
        SubjectConfig(key="port", name="Português", count=1, weight=1.0, min_score=0.0),
        SubjectConfig(key="math", name="Matemática", count=1, weight=2.0, min_score=0.0),
    ]


@pytest.fixture
def port_math_key():
    return AnswerKey(answers={"port": ["A"], "math": ["C"]}, type="Definitivo", version="v1")


@pytest.fixture
def make_submission():
    def _make(pid, answers=None, nickname=None, category="Ampla"):
        return ParticipantSubmission(
            participant_id=pid,
            nickname=nickname if nickname is not None else pid,
            category=category,
            answers=answers or {},
        )
    return _make


@pytest.fixture
def draft():
    return RankingDraft(
        title="Analista Judiciário",
        bank_name="FGV",
        schooling="Superior",
        min_overall_score=2.0,
        concurrency={
            "Ampla": {"vagas": 10, "concorrentes": 1000},
            "PP": {"vagas": 3, "concorrentes": 200},
            "PcD": {"vagas": 1, "concorrentes": 50},
        },
        subjects=[
            SubjectConfigCreate(name="Língua Portuguesa", count=3, weight=1.0, minScore=1.0),
            SubjectConfigCreate(name="Raciocínio Lógico", count=2, weight=2.0, minScore=0.0),
        ],
    )
