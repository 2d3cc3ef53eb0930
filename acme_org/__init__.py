"""acme_org — 조직 값 객체 패키지.

Organization value object package.
Re-exports the Organization class, its input records, and the shared
default instance `organization`.
"""

from acme_org.models.organization import Organization, organization
from acme_org.schemas.organization import OrganizationInit, OrganizationUpdate

__all__ = ["Organization", "organization", "OrganizationInit", "OrganizationUpdate"]
