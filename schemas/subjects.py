from pydantic import BaseModel, ConfigDict, Field


# ✅ 입력용: 랭킹 생성/과목 재설정 시 주최자가 넘기는 스키마
class SubjectConfigCreate(BaseModel):
    name: str = Field(..., min_length=1)                      # 과목 이름 (예: Português)
    count: int = Field(..., ge=1)                             # 문항 수
    weight: float = Field(1.0, gt=0)                          # 문항당 배점
    min_score: float = Field(0.0, ge=0, alias="minScore")     # 과목 과락 기준 점수

    model_config = ConfigDict(populate_by_name=True)


# ✅ 채점용: 과목 키(slug)가 확정된 설정
class SubjectConfig(SubjectConfigCreate):
    key: str = Field(..., min_length=1)                       # 과목 고유 키 (예: portugues)

    model_config = ConfigDict(populate_by_name=True, frozen=True)
