"""
Error types raised along the fetch-decode-select-render pipeline.

Every error carries the HTTP status the site answers with, so a single
Flask error handler can turn any of them into a plain-text response:

    SiteError                (base, 500)
    +-- ClientInputError     (bad or missing ``id`` query value, 400)
    +-- TransportError       (remote API unreachable, 500)
    +-- DecodeError          (malformed or mistyped JSON, 500)
    +-- NotFoundError        (no record with the requested ID, 404)
    +-- TemplateRenderError  (missing template or render failure, 500)
"""
from http import HTTPStatus


class SiteError(Exception):
    """Base class for every error that ends a request with an error page"""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message='An unexpected error occurred'):
        self.message = message
        super().__init__(message)


class ClientInputError(SiteError):
    status_code = HTTPStatus.BAD_REQUEST


class TransportError(SiteError):
    pass


class DecodeError(SiteError):
    pass


class NotFoundError(SiteError):
    status_code = HTTPStatus.NOT_FOUND


class TemplateRenderError(SiteError):
    pass
