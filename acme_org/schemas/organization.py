"""조직 관련 Pydantic 입력 스키마 정의.

Organization Pydantic input schema definitions.
Covers the initialization record used by the constructor and
the partial update record used by Organization.update.
Both records are strict: only str or None is accepted per field.
"""

from pydantic import BaseModel, ConfigDict


class OrganizationInit(BaseModel):
    """조직 초기화 레코드.

    Organization initialization record.
    All fields are optional; title takes precedence over name.
    Unknown keys are ignored.

    Attributes:
        title: 조직 표시 이름 (Display name, wins over name)
        name: 조직 이름 (Fallback display name)
        country: 국가 코드 (Country code, stored verbatim)
    """

    model_config = ConfigDict(strict=True)

    title: str | None = None  # name보다 우선 (Takes precedence over name)
    name: str | None = None
    country: str | None = None


class OrganizationUpdate(BaseModel):
    """조직 수정 레코드 (부분 업데이트).

    Organization update record (partial update).
    Only fields that were explicitly supplied are applied.
    title follows the same precedence over name as at construction.

    Attributes:
        title: 변경할 표시 이름 (New display name, wins over name when not None)
        name: 변경할 조직 이름 (New name, optional)
        country: 변경할 국가 코드 (New country code, optional)
    """

    model_config = ConfigDict(strict=True)

    title: str | None = None
    name: str | None = None
    country: str | None = None
