from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from schemas.participants import ParticipantCategory


class SubjectScore(BaseModel):
    hits: int = Field(0, ge=0)                  # 맞힌 문항 수
    total: int = Field(0, ge=0)                 # 채점한 문항 수
    score: float = 0.0                          # hits * weight
    eliminated_by_min_score: bool = False       # 과목 과락 여부

    model_config = ConfigDict(frozen=True)


class ScoredResult(BaseModel):
    """참가자 1명의 채점 결과 (항상 재계산 가능한 파생 데이터)"""
    participant_id: str
    nickname: str = ""
    category: ParticipantCategory = ParticipantCategory.AMPLA
    subject_scores: Dict[str, SubjectScore] = Field(default_factory=dict)
    final_score: float = 0.0
    eliminated: bool = False

    model_config = ConfigDict(frozen=True)

    def score_of(self, subject_key: str) -> float:
        subject = self.subject_scores.get(subject_key)
        return subject.score if subject else 0.0
