"""
services/errors.py

- 채점/랭킹 처리 중 호출 측에 그대로 전달되는 예외 모음
- 모든 예외는 code(에러 식별 코드)와 message를 가짐
- to_error_response(): 예외 → schemas.common.ErrorResponse (화면 표시용 표준 포맷)
"""

from schemas.common import ErrorDetail, ErrorResponse


class RankingError(Exception):
    """랭킹 처리 관련 예외의 공통 부모"""
    code = "RANKING_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(code=self.code, message=self.message)


# ===============================================================
# 정답표 파싱
# ===============================================================

class AnswerKeyError(RankingError):
    """정답표 파싱 실패 (저장된 정답표는 변경되지 않음)"""
    code = "ANSWER_KEY_ERROR"


class FormatError(AnswerKeyError):
    """과목별 추출 문항 수가 설정된 문항 수와 다름"""
    code = "ANSWER_KEY_FORMAT"

    def __init__(self, subject_name: str, expected: int, actual: int):
        super().__init__(
            f'정답표 형식 오류: "{subject_name}" 과목 - 예상 {expected}문항, 추출 {actual}문항'
        )
        self.subject_name = subject_name
        self.expected = expected
        self.actual = actual

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(
            code=self.code,
            message=self.message,
            subject=self.subject_name,
            expected=self.expected,
            actual=self.actual,
        )


class EmptyInputError(AnswerKeyError):
    """인식 가능한 과목 헤더/정답이 하나도 없음"""
    code = "ANSWER_KEY_EMPTY"


class MissingVersionError(AnswerKeyError):
    """정답표 버전 라벨 누락"""
    code = "ANSWER_KEY_VERSION_REQUIRED"


# ===============================================================
# 랭킹 설정 / 참가자 / 권한
# ===============================================================

class RankingConfigError(RankingError):
    code = "RANKING_CONFIG"


class ParticipantNotFoundError(RankingError):
    code = "PARTICIPANT_NOT_FOUND"

    def __init__(self, participant_id: str):
        super().__init__(f"참가자를 찾을 수 없습니다: {participant_id}")
        self.participant_id = participant_id


class PermissionDeniedError(RankingError):
    code = "PERMISSION_DENIED"

    def __init__(self, permission: str):
        super().__init__(f"권한이 없습니다: {permission}")
        self.permission = permission


def to_error_response(exc: Exception) -> ErrorResponse:
    """예외 → 표준 에러 응답 (알 수 없는 예외는 INTERNAL_ERROR)"""
    if isinstance(exc, RankingError):
        return ErrorResponse(error=exc.to_detail())
    return ErrorResponse(error=ErrorDetail(code="INTERNAL_ERROR", message=str(exc)))
