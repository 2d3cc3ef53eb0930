"""모델 패키지 — 도메인 값 객체.

Models package — Domain value objects.

Modules:
    organization: 조직 값 객체와 기본 인스턴스 (Organization and the shared default instance)
"""

from acme_org.models.organization import Organization, organization

__all__ = ["Organization", "organization"]
