"""
services/answer_key_parser.py

- 주최자가 붙여넣은 정답표 텍스트 → AnswerKey
- 과목 이름 줄(헤더)을 만나면 해당 과목 구간 시작, 이후 줄에서 정답 문자(A~E) 추출
- 과목별 추출 개수가 설정 문항 수와 하나라도 다르면 전체 실패 (부분 적용 없음)
"""

import logging
import re
from typing import Dict, List, Optional, Sequence

from config.settings import settings
from schemas.answer_keys import AnswerKey
from schemas.subjects import SubjectConfig
from services.errors import EmptyInputError, FormatError
from utils.text import normalize_header

logger = logging.getLogger(__name__)


def extract_answers(line: str, pattern: Optional[str] = None) -> List[str]:
    """한 줄에서 정답 문자를 순서대로 추출: "1-A 2-C 3-B" → ["A", "C", "B"]"""
    return re.findall(pattern or settings.ANSWER_PATTERN, line)


def parse_answer_key(
    text: str,
    subjects: Sequence[SubjectConfig],
    key_type: str = "Preliminar",
    version: str = "",
) -> AnswerKey:
    """
    정답표 텍스트 파싱

    입력 예시:
        Português
        A B C
        Matemática
        C D

    - 헤더 비교는 대소문자만 무시 (악센트는 구분)
    - 첫 헤더 이전 줄은 무시
    - 같은 헤더가 다시 나오면 그 과목은 처음부터 다시 수집
      (새 구간에 정답이 없으면 이전 정답 유지)
    - 추출된 정답이 전혀 없으면 EmptyInputError
    - 과목별 개수 불일치 시 설정 순서상 첫 과목으로 FormatError
    """
    headers: Dict[str, SubjectConfig] = {normalize_header(s.name): s for s in subjects}
    pattern = settings.ANSWER_PATTERN

    answers: Dict[str, List[str]] = {}
    current: Optional[SubjectConfig] = None
    buffer: List[str] = []

    def commit():
        # 빈 구간은 반영하지 않음 (이전에 모은 정답 유지)
        if current is not None and buffer:
            answers[current.key] = buffer

    for raw in (text or "").splitlines():
        line = raw.strip()
        if not line:
            continue

        subject = headers.get(normalize_header(line))
        if subject is not None:
            commit()
            current = subject
            buffer = []
            continue

        if current is None:
            continue
        buffer.extend(extract_answers(line, pattern))

    commit()

    if not answers:
        logger.warning("정답표 파싱 실패: 추출된 정답 없음")
        raise EmptyInputError("정답표를 추출할 수 없습니다. 과목 이름 다음 줄에 정답을 입력했는지 확인하세요.")

    for subject in subjects:
        actual = len(answers.get(subject.key, []))
        if actual != subject.count:
            logger.warning(
                f"정답표 파싱 실패: subject={subject.key}, expected={subject.count}, actual={actual}"
            )
            raise FormatError(subject.name, subject.count, actual)

    # 설정 순서대로 정렬해서 반환
    ordered = {subject.key: answers[subject.key] for subject in subjects}
    logger.info(f"정답표 파싱 완료: {key_type} {version} ({len(ordered)}과목)")
    return AnswerKey(answers=ordered, type=key_type, version=version)
