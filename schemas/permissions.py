from pydantic import BaseModel, ConfigDict


class RankingPermissions(BaseModel):
    """
    랭킹 화면에서 허용되는 동작 목록
    - 인식하는 권한은 아래 필드로 고정 (임의 키 불가)
    - 요청 경계에서 한 번 계산해서 넘겨줌 (dependencies/permissions.py)
    """
    can_view: bool = False
    can_submit: bool = False
    can_edit_answer_key: bool = False
    can_delete_participations: bool = False
    can_configure_subjects: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)
