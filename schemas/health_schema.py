"""Schema for the liveness endpoint."""

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Liveness payload. `timestamp` is epoch milliseconds."""

    status: str
    message: str
    version: str
    timestamp: int
