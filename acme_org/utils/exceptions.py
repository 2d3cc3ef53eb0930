"""커스텀 예외 클래스 모듈.

Custom exception classes module.
Every error raised by the package derives from OrganizationError,
so callers can catch the whole family with a single except clause.

Usage:
    from acme_org.utils.exceptions import InvalidOrganizationDataError
    raise InvalidOrganizationDataError("country must be a string")
"""


class OrganizationError(Exception):
    """패키지 기본 예외.

    Base exception for the package.

    Args:
        detail: 오류 메시지 (Error message, default: "Organization error")
    """

    def __init__(self, detail: str = "Organization error") -> None:
        super().__init__(detail)
        self.detail: str = detail


class InvalidOrganizationDataError(OrganizationError, TypeError):
    """잘못된 초기화/수정 데이터 예외 — 타입 경계에서의 오용.

    Raised when construction or update data is not a mapping or record,
    or when one of its fields is not a string.
    Subclasses TypeError because it marks misuse at the type boundary.

    Args:
        detail: 오류 메시지 (Error message, default: "Invalid organization data")
    """

    def __init__(self, detail: str = "Invalid organization data") -> None:
        super().__init__(detail)
