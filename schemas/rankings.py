"""
schemas/rankings.py

- 랭킹(시험 1건) 집합 모델과 생성/조회용 스키마
- 랭킹은 과목 설정 1세트, 현재 정답표 1개, 참가자 답안 여러 개를 소유
- 모든 변경은 services/ranking_service.py에서 새 인스턴스를 만들어 반환
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from config.settings import settings
from schemas.answer_keys import AnswerKey
from schemas.participants import ParticipantCategory, ParticipantSubmission
from schemas.results import ScoredResult
from schemas.subjects import SubjectConfig, SubjectConfigCreate


def _empty_concurrency():
    return {category: Concurrency() for category in ParticipantCategory}


class Concurrency(BaseModel):
    """응시 구분별 모집 인원/지원자 수"""
    vacancies: int = Field(0, ge=0, alias="vagas")
    contestants: int = Field(0, ge=0, alias="concorrentes")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


# ✅ 입력용: 랭킹 생성 폼
class RankingDraft(BaseModel):
    title: str = Field(..., min_length=1)                     # 시험명 / 직렬
    bank_name: str = ""                                       # 출제 기관 (Banca)
    schooling: str = "Superior"                               # 학력 요건
    min_overall_score: float = Field(
        default_factory=lambda: settings.DEFAULT_OVERALL_MIN_SCORE, ge=0
    )
    concurrency: Dict[ParticipantCategory, Concurrency] = Field(default_factory=_empty_concurrency)
    subjects: List[SubjectConfigCreate] = Field(..., min_length=1)


class Ranking(BaseModel):
    title: str
    description: str = ""
    min_overall_score: float = Field(0.0, ge=0)
    concurrency: Dict[ParticipantCategory, Concurrency] = Field(default_factory=_empty_concurrency)
    subjects: Dict[str, SubjectConfig] = Field(default_factory=dict)       # 입력 순서 = 문항 번호 순서
    answer_key: Optional[AnswerKey] = None
    submissions: Dict[str, ParticipantSubmission] = Field(default_factory=dict)
    results: Dict[str, ScoredResult] = Field(default_factory=dict)         # 마지막 계산 결과 캐시

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_subject_keys(self):
        for key, subject in self.subjects.items():
            if key != subject.key:
                raise ValueError(f"과목 키 불일치: {key!r} != {subject.key!r}")
        return self

    def subject_list(self) -> List[SubjectConfig]:
        return list(self.subjects.values())


# ✅ 순위표 조회 조건
class RankingQuery(BaseModel):
    category: str = "all"                                      # "all" 또는 ParticipantCategory 값
    search: str = ""                                           # 닉네임 부분 검색
    sort_key: str = Field(default_factory=lambda: settings.DEFAULT_SORT_KEY)
    sort_direction: Literal["asc", "desc"] = Field(
        default_factory=lambda: settings.DEFAULT_SORT_DIRECTION
    )


# ✅ 출력용: 랭킹 상단 요약
class RankingSummary(BaseModel):
    title: str
    total_vacancies: int
    total_contestants: int
    participants: int
    min_overall_score: float
    answer_key_label: Optional[str] = None
