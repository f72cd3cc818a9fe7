"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 포함 내용:
  1) 에러 응답 표준: ErrorDetail, ErrorResponse
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


# =========================================================
# 1) 에러 응답 표준
# =========================================================

class ErrorDetail(BaseModel):
    """에러 코드/메시지를 담는 최소 단위"""
    code: str = Field(..., description="에러 식별 코드 (예: ANSWER_KEY_FORMAT, ANSWER_KEY_EMPTY)")
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")
    subject: Optional[str] = Field(default=None, description="문제가 된 과목 이름(정답표 형식 오류 시)")
    expected: Optional[int] = Field(default=None, ge=0, description="설정된 문항 수")
    actual: Optional[int] = Field(default=None, ge=0, description="정답표에서 추출된 문항 수")

    model_config = ConfigDict(extra="ignore")


class ErrorResponse(BaseModel):
    """
    호출 측(화면/호스트 앱)에 그대로 돌려줄 표준 에러 응답
    - services/errors.py의 to_error_response()가 이 스키마로 변환
    """
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="응답 생성 시각 (UTC)"
    )

    model_config = ConfigDict(extra="ignore")
