"""
config/settings.py

- .env에 정의한 환경변수를 읽어 채점 엔진 전역 설정으로 제공합니다.
- pydantic v2 / pydantic-settings v2 사용.
- 모든 값에 기본값이 있으므로 .env 없이도 Settings()가 생성됩니다.
"""

from typing import Literal
from pydantic import field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # =========================
    # 앱 (CLI 도움말 제목)
    # =========================
    APP_TITLE: str = "Ranking Preditivo"

    # =========================
    # 정답표(Gabarito) 파싱
    # =========================
    # 정답으로 인정하는 선택지 문자 (대문자만 추출)
    ANSWER_ALPHABET: str = "ABCDE"

    @field_validator("ANSWER_ALPHABET", mode="before")
    @classmethod
    def _clean_alphabet(cls, v):
        if isinstance(v, str):
            # "A, B ,C" → "ABC"
            return "".join(ch for ch in v if not ch.isspace() and ch != ",")
        return v

    @computed_field  # type: ignore[misc]
    @property
    def ANSWER_PATTERN(self) -> str:
        """
        정답 문자 추출용 정규식. ANSWER_ALPHABET이 "ABCDE"이면 "[ABCDE]".
        """
        return f"[{self.ANSWER_ALPHABET}]"

    # =========================
    # 채점 / 순위
    # =========================
    DEFAULT_OVERALL_MIN_SCORE: float = 40.0

    DEFAULT_SORT_KEY: str = "final_score"
    DEFAULT_SORT_DIRECTION: Literal["asc", "desc"] = "desc"

    # =========================
    # Logging
    # =========================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # =========================
    # BaseSettings Config
    # =========================
    model_config = SettingsConfigDict(
        env_file=".env",               # .env에서 값 로드
        env_file_encoding="utf-8",
        case_sensitive=False,          # 환경변수 대소문자 비구분
        extra="ignore",                # 정의되지 않은 키는 무시
    )


# ✅ settings 객체를 통해 어디서든 접근 가능
settings = Settings()
