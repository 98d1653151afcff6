import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> dt.datetime:
    """Date/heure UTC (timezone-aware)."""
    return dt.datetime.now(dt.timezone.utc)


class HealthCheck(BaseModel):
    """Modèle de réponse health check"""

    status: str = Field(..., description="Overall status: ok, degraded")
    timestamp: dt.datetime = Field(default_factory=utcnow)
    version: str = Field(..., description="API version")
    checks: dict[str, str] = Field(..., description="Individual service checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "timestamp": "2026-10-18T10:30:00Z",
                "version": "0.1.0",
                "checks": {"database": "ok"},
            }
        }
    )
