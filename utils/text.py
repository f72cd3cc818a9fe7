"""
utils/text.py

- 과목 키(slug) 생성, 정답표 헤더 비교, 닉네임/카테고리 정렬 키 등
  문자열 정규화 함수 모음
"""

import re
import unicodedata

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9_ -]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")
_UNDERSCORES = re.compile(r"_+")


def strip_accents(value: str) -> str:
    """NFD 분해 후 결합 문자(U+0300~U+036F) 제거: "Matemática" → "Matematica" """
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not ("\u0300" <= ch <= "\u036f"))


def slugify(name: str) -> str:
    """
    과목 표시 이름 → 과목 키

    규칙 (순서대로 적용)
    1) 앞뒤 공백 제거 후 소문자화
    2) 악센트 제거 ("ç" → "c", "á" → "a")
    3) a-z, 0-9, "_", " ", "-" 이외 문자 삭제
    4) 공백 묶음 → "_", 하이픈 묶음 → "_", 연속 "_" → "_" 하나

    예: "Língua Portuguesa" → "lingua_portuguesa", "Raciocínio-Lógico" → "raciocinio_logico"
    """
    slug = strip_accents(name.strip().lower())
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("_", slug)
    slug = _DASHES.sub("_", slug)
    return _UNDERSCORES.sub("_", slug)


def normalize_header(line: str) -> str:
    """정답표 헤더 비교용: 앞뒤 공백 제거 + 소문자화 (악센트는 유지)"""
    return line.strip().lower()


def collation_key(value: str):
    """
    로케일 비교(localeCompare)에 가까운 정렬 키
    - 1차: 악센트/대소문자 무시
    - 2차: 악센트 포함 비교
    - 3차: 소문자 우선
    """
    value = value or ""
    return (strip_accents(value).casefold(), value.casefold(), value.swapcase())
