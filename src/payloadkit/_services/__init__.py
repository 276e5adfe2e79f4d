from ._request_service import RequestService

__all__ = ["RequestService"]
