from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnswerKey(BaseModel):
    """
    정답표(Gabarito)
    - answers: 과목키 → 문항 순서대로의 정답 문자 목록
    - type / version: 화면 표시용 메타데이터 (채점에는 사용하지 않음)
    """
    answers: Dict[str, List[str]] = Field(default_factory=dict)
    type: str = "Preliminar"                 # 예: Preliminar(가답안), Definitivo(확정답안)
    version: str = ""                        # 예: "v1", "Caderno A"

    model_config = ConfigDict(frozen=True)

    def for_subject(self, subject_key: str) -> Optional[List[str]]:
        return self.answers.get(subject_key)

    @property
    def label(self) -> str:
        return f"{self.type} - {self.version}" if self.version else self.type
