"""
services/ranking_service.py

- 랭킹 생성, 참가자 답안 등록/수정/삭제, 정답표 교체, 과목 재설정, 순위표 조회
- Ranking은 불변 모델: 모든 함수는 새 Ranking을 만들어 반환
- 저장/동시성 제어는 호출 측(호스트 앱) 책임
"""

import logging
from itertools import cycle, islice
from typing import Dict, List, Sequence, Tuple

from config.settings import settings
from schemas.answer_keys import AnswerKey
from schemas.participants import ParticipantSubmission
from schemas.rankings import Ranking, RankingDraft, RankingQuery, RankingSummary
from schemas.results import ScoredResult
from schemas.subjects import SubjectConfig, SubjectConfigCreate
from services.answer_key_parser import parse_answer_key
from services.errors import EmptyInputError, MissingVersionError, ParticipantNotFoundError, RankingConfigError
from services.scoring_engine import rank_and_filter, rescore_all, score_participant
from utils.text import slugify

logger = logging.getLogger(__name__)


# ==========================================================
# [공통] 과목 설정
# ==========================================================

def build_subjects(drafts: Sequence[SubjectConfigCreate]) -> Dict[str, SubjectConfig]:
    """과목 입력 → {slug: SubjectConfig} (입력 순서 유지, slug 중복/빈 값은 거부)"""
    subjects: Dict[str, SubjectConfig] = {}
    for draft in drafts:
        key = slugify(draft.name)
        if not key:
            raise RankingConfigError(f"과목 이름으로 키를 만들 수 없습니다: {draft.name!r}")
        if key in subjects:
            raise RankingConfigError(f"과목 키가 중복됩니다: {key} ({draft.name})")
        subjects[key] = SubjectConfig(key=key, **draft.model_dump())
    return subjects


def placeholder_answer_key(subjects: Sequence[SubjectConfig]) -> AnswerKey:
    """랭킹 생성 직후 임시 정답표: 과목마다 A, B, C, D, E 반복"""
    alphabet = settings.ANSWER_ALPHABET
    return AnswerKey(
        answers={s.key: list(islice(cycle(alphabet), s.count)) for s in subjects},
        type="Preliminar",
        version="",
    )


def _with_results(ranking: Ranking, **update) -> Ranking:
    """update 적용 후 전체 참가자 재채점"""
    updated = ranking.model_copy(update=update)
    results = rescore_all(
        updated.submissions.values(),
        updated.subject_list(),
        updated.answer_key,
        updated.min_overall_score,
    )
    return updated.model_copy(update={"results": {r.participant_id: r for r in results}})


# ==========================================================
# [1] 랭킹 생성
# ==========================================================

def create_ranking(draft: RankingDraft) -> Ranking:
    subjects = build_subjects(draft.subjects)
    ranking = Ranking(
        title=draft.title,
        description=f"Banca: {draft.bank_name} | Escolaridade: {draft.schooling}",
        min_overall_score=draft.min_overall_score,
        concurrency=draft.concurrency,
        subjects=subjects,
        answer_key=placeholder_answer_key(list(subjects.values())),
    )
    logger.info(f"랭킹 생성: {ranking.title} ({len(subjects)}과목)")
    return ranking


# ==========================================================
# [2] 참가자 답안
# ==========================================================

def submit_participation(
    ranking: Ranking, submission: ParticipantSubmission
) -> Tuple[Ranking, ScoredResult]:
    """등록/수정(participant_id 기준 upsert) 후 해당 참가자만 채점"""
    result = score_participant(
        submission, ranking.subject_list(), ranking.answer_key, ranking.min_overall_score
    )
    is_update = submission.participant_id in ranking.submissions
    updated = ranking.model_copy(update={
        "submissions": {**ranking.submissions, submission.participant_id: submission},
        "results": {**ranking.results, submission.participant_id: result},
    })
    logger.info(
        f"답안 {'수정' if is_update else '등록'}: participant={submission.participant_id}, "
        f"score={result.final_score}, eliminated={result.eliminated}"
    )
    return updated, result


def withdraw_participation(ranking: Ranking, participant_id: str) -> Ranking:
    if participant_id not in ranking.submissions:
        raise ParticipantNotFoundError(participant_id)
    submissions = {k: v for k, v in ranking.submissions.items() if k != participant_id}
    results = {k: v for k, v in ranking.results.items() if k != participant_id}
    logger.info(f"참가 취소: participant={participant_id}")
    return ranking.model_copy(update={"submissions": submissions, "results": results})


# ==========================================================
# [3] 정답표 교체 / 과목 재설정 → 전체 재채점
# ==========================================================

def replace_answer_key(ranking: Ranking, text: str, key_type: str, version: str) -> Ranking:
    """
    정답표 교체
    - 파싱 실패(FormatError / EmptyInputError) 시 예외가 그대로 전달되고 랭킹은 변경되지 않음
    - 성공 시 모든 참가자 재채점
    """
    if not (text or "").strip():
        raise EmptyInputError("정답표 텍스트를 입력하세요.")
    if not (version or "").strip():
        raise MissingVersionError("정답표 버전을 입력하세요.")
    answer_key = parse_answer_key(text, ranking.subject_list(), key_type, version)
    logger.info(f"정답표 교체: {answer_key.label} → {len(ranking.submissions)}명 재채점")
    return _with_results(ranking, answer_key=answer_key)


def reconfigure_subjects(ranking: Ranking, drafts: Sequence[SubjectConfigCreate]) -> Ranking:
    """
    과목 재설정 후 재채점
    - 기존 정답표는 그대로 두고, 문항 수가 맞지 않는 과목은 채점 시 부족한 문항만 오답 처리
    """
    subjects = build_subjects(drafts)
    return _with_results(ranking, subjects=subjects)


def rescore_ranking(ranking: Ranking) -> Ranking:
    return _with_results(ranking)


# ==========================================================
# [4] 조회
# ==========================================================

def ranking_view(ranking: Ranking, query: RankingQuery = None) -> List[ScoredResult]:
    query = query or RankingQuery()
    return rank_and_filter(
        ranking.results.values(),
        category_filter=query.category,
        nickname_search=query.search,
        sort_key=query.sort_key,
        sort_direction=query.sort_direction,
    )


def summarize(ranking: Ranking) -> RankingSummary:
    return RankingSummary(
        title=ranking.title,
        total_vacancies=sum(c.vacancies for c in ranking.concurrency.values()),
        total_contestants=sum(c.contestants for c in ranking.concurrency.values()),
        participants=len(ranking.submissions),
        min_overall_score=ranking.min_overall_score,
        answer_key_label=ranking.answer_key.label if ranking.answer_key and ranking.answer_key.version else None,
    )
