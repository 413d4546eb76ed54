"""Service-info API schema."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.dtos.service_info import ServiceInfo


class ServiceInfoResponse(BaseModel):
    """Response data for GET /info."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    service_name: str
    app_version: str
    timestamp: str = Field(..., description="Epoch milliseconds as a string")

    @classmethod
    def from_dto(cls, info: ServiceInfo) -> "ServiceInfoResponse":
        return cls(
            service_name=info.service_name,
            app_version=info.app_version,
            timestamp=info.timestamp,
        )
