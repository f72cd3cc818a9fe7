"""
utils/answer_fields.py

- 답안 입력 폼의 평면 필드("<과목키>_q<번호>") ↔ 과목별 답안 dict 변환
- 문항 번호는 시험 전체 기준으로 1번부터 이어서 매깁니다.
  예: port(2문항), math(3문항) → port_q1, port_q2, math_q3, math_q4, math_q5
"""

from typing import Any, Dict, Mapping, Sequence

from schemas.subjects import SubjectConfig


def field_name(subject_key: str, question_number: int) -> str:
    return f"{subject_key}_q{question_number}"


def question_offsets(subjects: Sequence[SubjectConfig]) -> Dict[str, int]:
    """과목 키 → 해당 과목 첫 문항의 전체 번호(1부터)"""
    offsets: Dict[str, int] = {}
    current = 1
    for subject in subjects:
        offsets[subject.key] = current
        current += subject.count
    return offsets


def parse_answer_fields(
    fields: Mapping[str, Any], subjects: Sequence[SubjectConfig]
) -> Dict[str, Dict[int, str]]:
    """
    폼 필드 → {과목키: {과목 내 문항 인덱스(0부터): 선택지}}
    - 값이 없거나 빈 문자열이면 미응답으로 보고 건너뜀
    - 설정에 없는 필드(닉네임 등)는 무시
    """
    offsets = question_offsets(subjects)
    answers: Dict[str, Dict[int, str]] = {}
    for subject in subjects:
        start = offsets[subject.key]
        marked: Dict[int, str] = {}
        for i in range(subject.count):
            value = fields.get(field_name(subject.key, start + i))
            if value is None or value == "":
                continue
            marked[i] = str(value)
        answers[subject.key] = marked
    return answers


def to_answer_fields(
    answers: Mapping[str, Mapping[int, str]], subjects: Sequence[SubjectConfig]
) -> Dict[str, str]:
    """수정 화면 미리 채우기용: 과목별 답안 → 평면 폼 필드 (미응답은 "")"""
    offsets = question_offsets(subjects)
    fields: Dict[str, str] = {}
    for subject in subjects:
        start = offsets[subject.key]
        marked = answers.get(subject.key, {})
        for i in range(subject.count):
            fields[field_name(subject.key, start + i)] = marked.get(i, "")
    return fields
