"""테스트 인프라 — 기본 조직 스냅샷/복원, 조직 픽스처.

Test infrastructure — Snapshot and restore of the shared default organization,
plus helper fixtures for building organizations.
The shared instance is restored after every test so mutations never leak.
"""

from collections.abc import Generator

import pytest

from acme_org.models.organization import Organization, organization


# ---------------------------------------------------------------------------
# Function-scoped: 기본 조직 격리
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def restore_default_organization() -> Generator[Organization, None, None]:
    """각 테스트 후 기본 조직의 이름과 국가 코드를 복원합니다."""
    name, country = organization.name, organization.country
    yield organization
    organization.name = name
    organization.country = country


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 조직 생성
# ---------------------------------------------------------------------------
@pytest.fixture
def org() -> Organization:
    """테스트 조직을 생성합니다."""
    return Organization({"title": "Test Corp", "country": "KR"})
