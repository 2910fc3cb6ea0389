# ihub/errors.py
"""Error taxonomy shared by the routers and services.

Every failure the API reports is one of these; the app-level handlers in
``ihub.main`` render them as ``{"message": ...}`` with ``status_code``.
"""


class IHubError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(IHubError):
    """Missing or malformed input"""
    status_code = 400


class InvalidIdentifier(ValidationError):
    """An id that is not well formed for the store"""

    def __init__(self, kind: str, value=None):
        super().__init__(f"Invalid {kind} ID format")
        self.kind = kind
        self.value = value


class NotFound(IHubError):
    status_code = 404

    def __init__(self, kind: str):
        super().__init__(f"{kind} not found")
        self.kind = kind


class StoreError(IHubError):
    """I/O or connection failure in the entity store"""
    status_code = 500
