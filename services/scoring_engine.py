"""
services/scoring_engine.py

- 과목별 채점, 참가자 총점/탈락 판정, 전체 재채점, 순위표 필터/정렬
- 모든 함수는 입력을 변경하지 않는 순수 함수
- 채점 함수는 예외를 던지지 않음: 과목 설정/정답이 없으면 0점 처리
"""

import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from schemas.answer_keys import AnswerKey
from schemas.participants import ParticipantSubmission
from schemas.results import ScoredResult, SubjectScore
from schemas.subjects import SubjectConfig
from utils.text import collation_key

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"
TEXT_SORT_KEYS = ("nickname", "category")
SORT_DIRECTIONS = ("asc", "desc")


# ==========================================================
# [1] 채점
# ==========================================================

def score_subject(
    answers: Mapping[int, str],
    subject_key: str,
    subject_config: Optional[SubjectConfig],
    answer_key: Optional[AnswerKey],
) -> SubjectScore:
    """
    과목 1개 채점
    - answers: 해당 과목의 {문항 인덱스: 선택지}
    - 둘 다 비어있지 않고 정확히 같을 때만 정답 처리 (미응답은 항상 오답)
    - 설정 또는 정답이 없으면 아직 채점할 수 없는 과목 → 0점, 과락 아님
    """
    correct = answer_key.for_subject(subject_key) if answer_key is not None else None
    if subject_config is None or not correct:
        return SubjectScore()

    hits = 0
    for i in range(subject_config.count):
        marked = answers.get(i)
        expected = correct[i] if i < len(correct) else None
        if marked and expected and marked == expected:
            hits += 1

    score = hits * subject_config.weight
    return SubjectScore(
        hits=hits,
        total=subject_config.count,
        score=score,
        eliminated_by_min_score=score < subject_config.min_score,
    )


def score_participant(
    participant: ParticipantSubmission,
    subjects: Sequence[SubjectConfig],
    answer_key: Optional[AnswerKey],
    overall_min_score: float,
) -> ScoredResult:
    """
    참가자 1명 채점
    - 탈락 = (과목 과락이 하나라도 있음) OR (총점 < 전체 최저 점수)
    """
    subject_scores = {}
    final_score = 0.0
    eliminated = False

    for subject in subjects:
        result = score_subject(
            participant.answers.get(subject.key, {}), subject.key, subject, answer_key
        )
        subject_scores[subject.key] = result
        final_score += result.score
        if result.eliminated_by_min_score:
            eliminated = True

    if final_score < overall_min_score:
        eliminated = True

    logger.debug(
        f"채점 완료: participant={participant.participant_id}, score={final_score}, eliminated={eliminated}"
    )
    return ScoredResult(
        participant_id=participant.participant_id,
        nickname=participant.nickname,
        category=participant.category,
        subject_scores=subject_scores,
        final_score=final_score,
        eliminated=eliminated,
    )


def rescore_all(
    participants: Iterable[ParticipantSubmission],
    subjects: Sequence[SubjectConfig],
    answer_key: Optional[AnswerKey],
    overall_min_score: float,
) -> List[ScoredResult]:
    """
    전체 재채점 (정답표 교체/과목 재설정 시 호출)
    - 참가자끼리 의존성 없음, 입력 순서대로 결과 반환
    """
    results = [
        score_participant(p, subjects, answer_key, overall_min_score) for p in participants
    ]
    eliminated = sum(1 for r in results if r.eliminated)
    logger.info(f"전체 재채점 완료: {len(results)}명 (탈락 {eliminated}명)")
    return results


# ==========================================================
# [2] 순위표
# ==========================================================

def _sort_value(result: ScoredResult, sort_key: str):
    if sort_key == "nickname":
        return collation_key(result.nickname)
    if sort_key == "category":
        return collation_key(result.category.value)
    if sort_key == "final_score":
        return result.final_score
    # 과목 키면 과목 점수, 알 수 없는 키는 0 (입력 순서 유지)
    return result.score_of(sort_key)


def rank_and_filter(
    results: Iterable[ScoredResult],
    category_filter: Optional[str] = ALL_CATEGORIES,
    nickname_search: str = "",
    sort_key: str = "final_score",
    sort_direction: str = "desc",
) -> List[ScoredResult]:
    """
    순위표 생성
    1) 구분 필터("all"이면 전체) + 닉네임 부분 검색(대소문자 무시)
    2) 통과자 / 탈락자 분리 후 각각 정렬
    3) 통과자 전체 → 탈락자 전체 순서로 연결 (점수와 무관하게 섞이지 않음)
    """
    if sort_direction not in SORT_DIRECTIONS:
        raise ValueError(f"sort_direction must be one of {SORT_DIRECTIONS}: {sort_direction!r}")

    search = (nickname_search or "").casefold()
    filtered = [
        r for r in results
        if (not category_filter or category_filter == ALL_CATEGORIES or r.category.value == category_filter)
        and (not search or search in (r.nickname or "").casefold())
    ]

    reverse = sort_direction == "desc"

    def ordered(group: List[ScoredResult]) -> List[ScoredResult]:
        return sorted(group, key=lambda r: _sort_value(r, sort_key), reverse=reverse)

    approved = ordered([r for r in filtered if not r.eliminated])
    eliminated = ordered([r for r in filtered if r.eliminated])
    return approved + eliminated


def number_positions(ranked: Sequence[ScoredResult]) -> List[Tuple[int, ScoredResult]]:
    """화면 표시용 순위 번호(1부터)"""
    return list(enumerate(ranked, start=1))
