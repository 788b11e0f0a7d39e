from enum import Enum
from typing import Optional

__all__ = [
    'LinkStoreErrorKind',
    'LinkStoreError',
    'StoreUnavailable',
    'WriteFailure',
    'NotFound',
    'LinkServiceError',
    'ShortenFailed',
    'ResolveFailed',
]


class LinkStoreErrorKind(str, Enum):
    """Outcomes a link store reports besides success"""
    STORE_UNAVAILABLE = "store_unavailable"
    WRITE_FAILURE = "write_failure"
    NOT_FOUND = "not_found"


class LinkStoreError(Exception):
    kind: LinkStoreErrorKind


class StoreUnavailable(LinkStoreError):
    kind = LinkStoreErrorKind.STORE_UNAVAILABLE


class WriteFailure(LinkStoreError):
    kind = LinkStoreErrorKind.WRITE_FAILURE


class NotFound(LinkStoreError):
    kind = LinkStoreErrorKind.NOT_FOUND

    def __init__(self, link_id: str):
        super().__init__(f"No link with id {link_id!r}")
        self.link_id = link_id


class LinkServiceError(Exception):
    """Façade-level failure; `cause_kind` tells which store outcome caused it."""

    def __init__(self, message: str, cause_kind: Optional[LinkStoreErrorKind] = None):
        super().__init__(message)
        self.cause_kind = cause_kind


class ShortenFailed(LinkServiceError):
    pass


class ResolveFailed(LinkServiceError):
    pass
