from schemas.permissions import RankingPermissions
from services.errors import PermissionDeniedError


def resolve_permissions(is_authenticated: bool, is_admin: bool = False, is_creator: bool = False) -> RankingPermissions:
    """
    요청 경계에서 한 번만 호출해서 권한 레코드를 만든다.
    - 비로그인: 조회만
    - 로그인: 조회 + 본인 답안 등록/수정/삭제
    - 랭킹 생성자/관리자: 정답표 교체, 과목 재설정, 참가 기록 삭제
    """
    manager = is_authenticated and (is_admin or is_creator)
    return RankingPermissions(
        can_view=True,
        can_submit=is_authenticated,
        can_edit_answer_key=manager,
        can_delete_participations=manager,
        can_configure_subjects=manager,
    )


def require_permission(permissions: RankingPermissions, name: str) -> RankingPermissions:
    # 알 수 없는 권한 이름은 호출 코드 버그
    if name not in RankingPermissions.model_fields:
        raise ValueError(f"Unknown permission: {name}")

    if not getattr(permissions, name):
        raise PermissionDeniedError(name)

    return permissions
