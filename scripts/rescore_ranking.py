"""
랭킹 JSON을 불러와 (선택) 정답표를 교체하고 순위표를 출력합니다.

Run: python -m scripts.rescore_ranking data/ranking.json --answer-key gabarito.txt --version v2
"""
import argparse
import logging
import sys
from pathlib import Path

from config.settings import settings
from schemas.rankings import Ranking, RankingQuery
from services.errors import RankingError, to_error_response
from services.ranking_service import ranking_view, replace_answer_key, rescore_ranking, summarize
from services.scoring_engine import number_positions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"{settings.APP_TITLE}: rescore a ranking and print the ordered table."
    )
    parser.add_argument("ranking", help="Path to the ranking JSON file")
    parser.add_argument("--answer-key", help="Text file with the pasted answer key")
    parser.add_argument("--type", default="Preliminar", help="Answer key type (default Preliminar)")
    parser.add_argument("--version", default="", help="Answer key version label")
    parser.add_argument("--category", default="all", help="Category filter (default all)")
    parser.add_argument("--search", default="", help="Nickname substring")
    parser.add_argument("--sort-key", default=settings.DEFAULT_SORT_KEY)
    parser.add_argument("--sort-direction", choices=["asc", "desc"], default=settings.DEFAULT_SORT_DIRECTION)
    parser.add_argument("--save", action="store_true", help="Write the rescored ranking back to the file")
    return parser


def format_table(ranking: Ranking, query: RankingQuery) -> str:
    subjects = ranking.subject_list()
    lines = []
    for pos, result in number_positions(ranking_view(ranking, query)):
        parts = [f"{result.score_of(s.key):.1f}" for s in subjects]
        mark = " X" if result.eliminated else ""
        lines.append(
            f"{pos:3d}º  {(result.nickname or 'Anônimo')[:20]:20s}  {result.category.value:5s}  "
            f"{'  '.join(parts)}  {result.final_score:.1f} pts{mark}"
        )
    return "\n".join(lines)


def main(argv=None) -> int:
    logging.basicConfig(level=settings.LOG_LEVEL)
    args = build_parser().parse_args(argv)

    path = Path(args.ranking)
    ranking = Ranking.model_validate_json(path.read_text(encoding="utf-8"))

    try:
        if args.answer_key:
            text = Path(args.answer_key).read_text(encoding="utf-8")
            ranking = replace_answer_key(ranking, text, args.type, args.version)
        else:
            ranking = rescore_ranking(ranking)
    except RankingError as e:
        print(to_error_response(e).model_dump_json(indent=2))
        return 1

    summary = summarize(ranking)
    print(f"{summary.title} | vagas {summary.total_vacancies} | participantes {summary.participants}"
          f" | mínimo {summary.min_overall_score:.1f}"
          + (f" | gabarito {summary.answer_key_label}" if summary.answer_key_label else ""))
    query = RankingQuery(
        category=args.category,
        search=args.search,
        sort_key=args.sort_key,
        sort_direction=args.sort_direction,
    )
    print(format_table(ranking, query))

    if args.save:
        path.write_text(ranking.model_dump_json(indent=2, by_alias=True), encoding="utf-8")
        logger.info(f"랭킹 저장 완료: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
