import csv
import logging
from pathlib import Path

from config.settings import settings
from schemas.participants import ParticipantSubmission
from schemas.rankings import Ranking
from services.ranking_service import submit_participation
from utils.answer_fields import parse_answer_fields

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

RANKING_PATH = "data/ranking.json"        # ✅ 랭킹 파일 경로
CSV_PATH = "data/submissions.csv"         # ✅ 답안 파일 경로 (participant_id, nickname, category, <과목키>_q<번호>...)


def load_submissions(ranking: Ranking, csv_path: str):
    subjects = ranking.subject_list()
    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            yield ParticipantSubmission(
                participant_id=row["participant_id"],                 # 참가자 ID
                nickname=row.get("nickname") or "",                   # 닉네임
                category=row.get("category") or "Ampla",              # 응시 구분
                answers=parse_answer_fields(row, subjects),           # 과목별 답안
            )


def import_submissions(ranking_path: str = RANKING_PATH, csv_path: str = CSV_PATH) -> Ranking:
    path = Path(ranking_path)
    ranking = Ranking.model_validate_json(path.read_text(encoding="utf-8"))

    count = 0
    for submission in load_submissions(ranking, csv_path):
        ranking, _ = submit_participation(ranking, submission)
        count += 1

    path.write_text(ranking.model_dump_json(indent=2, by_alias=True), encoding="utf-8")
    logger.info(f"✅ 답안 CSV → 랭킹 반영 완료 ({count}건)")
    return ranking


if __name__ == "__main__":
    import_submissions()
