"""Status use cases."""

from .get_status import GetStatusRequest, GetStatusResponse, GetStatusUseCase

__all__ = ["GetStatusRequest", "GetStatusResponse", "GetStatusUseCase"]
