from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class ParticipantCategory(str, Enum):
    """응시 구분 (필터/그룹핑 전용, 채점에는 영향 없음)"""
    AMPLA = "Ampla"     # 일반 전형
    PP = "PP"           # 흑인·혼혈 쿼터
    PCD = "PcD"         # 장애인 쿼터


class ParticipantSubmission(BaseModel):
    participant_id: str = Field(..., min_length=1)                    # 참가자 식별자 (불투명 값)
    nickname: str = ""                                                # 순위표 표시 이름
    category: ParticipantCategory = ParticipantCategory.AMPLA         # 응시 구분
    # 과목키 → {과목 내 문항 인덱스(0부터): 선택지}, 없는 문항은 미응답
    answers: Dict[str, Dict[int, str]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
