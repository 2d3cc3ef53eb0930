"""조직 값 객체 모델 정의.

Organization value object definition.
Holds a display name and a country code behind property accessors,
and exposes the process-wide shared default instance `organization`.
"""

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from acme_org.schemas.organization import OrganizationInit, OrganizationUpdate
from acme_org.utils.exceptions import InvalidOrganizationDataError

logger = logging.getLogger(__name__)

_Record = TypeVar("_Record", bound=BaseModel)


def _parse_record(schema: type[_Record], data: Any) -> _Record:
    """입력 데이터를 스키마 레코드로 변환 — Coerce a mapping or record into `schema`."""
    if data is None:
        return schema()
    if isinstance(data, schema):
        return data
    if not isinstance(data, Mapping):
        raise InvalidOrganizationDataError(
            f"Expected a mapping or {schema.__name__}, got {type(data).__name__}"
        )
    try:
        return schema.model_validate(dict(data))
    except ValidationError as exc:
        raise InvalidOrganizationDataError(str(exc)) from exc


class Organization:
    """조직 모델 — 이름과 국가 코드를 가진 값 객체.

    Organization value object with a display name and a country code.
    Fields missing at construction read back as None; setters overwrite
    unconditionally without validation.

    Attributes:
        name: 조직 표시 이름 (Display name, title wins over name at construction)
        country: 국가 코드 (Country code, stored verbatim)
    """

    # 가변 객체 — Mutable, therefore unhashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: OrganizationInit | Mapping[str, Any] | None = None) -> None:
        init: OrganizationInit = _parse_record(OrganizationInit, data)
        # title 우선, 없으면 name — title wins, else name, else None
        self._title: str | None = init.title if init.title is not None else init.name
        self._country: str | None = init.country
        logger.debug("Organization created: name=%r country=%r", self._title, self._country)

    @property
    def name(self) -> str | None:
        return self._title

    @name.setter
    def name(self, value: str | None) -> None:
        logger.debug("Organization name changed: %r -> %r", self._title, value)
        self._title = value

    @property
    def country(self) -> str | None:
        return self._country

    @country.setter
    def country(self, value: str | None) -> None:
        logger.debug("Organization country changed: %r -> %r", self._country, value)
        self._country = value

    def update(self, data: OrganizationUpdate | Mapping[str, Any]) -> "Organization":
        """조직 정보를 부분 수정합니다.

        Apply a partial update. Only fields explicitly supplied are written,
        each through its property setter.

        Args:
            data: 수정할 데이터 (OrganizationUpdate or mapping with title/name/country)

        Returns:
            Organization: 수정된 자기 자신 (The same instance)

        Raises:
            InvalidOrganizationDataError: 매핑이 아니거나 필드 타입 오류 (Not a mapping, or non-string field)
        """
        changes: OrganizationUpdate = _parse_record(OrganizationUpdate, data)
        update_data: dict[str, str | None] = changes.model_dump(exclude_unset=True)
        # title 우선, 생성자와 동일 — title wins over name, as at construction
        if update_data.get("title") is not None:
            self.name = update_data["title"]
        elif "name" in update_data:
            self.name = update_data["name"]
        if "country" in update_data:
            self.country = update_data["country"]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Organization):
            return NotImplemented
        return self.name == other.name and self.country == other.country

    def __repr__(self) -> str:
        return f"Organization(name={self.name!r}, country={self.country!r})"


# 기본 조직 싱글턴 인스턴스 — Shared default organization (created at import, mutable, process-wide)
organization: Organization = Organization(OrganizationInit(title="Acme Gooseberries", country="GB"))
