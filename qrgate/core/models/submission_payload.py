"""
SubmissionPayload model: the body sent to the wristband verification endpoint.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_serializer

UNKNOWN_OPERATOR = "usuario_desconocido"


class SubmissionPayload(BaseModel):
    """
    API-shaped projection of a ParsedRecord, created fresh per verification attempt.

    Python attribute names are English; serialised keys follow the
    verification endpoint (see to_api_dict()).

    Attributes:
        event, location, zone, date, time, wristband_id: The decoded fields
        raw: The code as scanned (trimmed)
        processed_at: When the payload was formatted (not when it was scanned)
        verifying_operator: Operator label, or UNKNOWN_OPERATOR
    """

    event: str = Field(..., serialization_alias="evento")
    location: str = Field(..., serialization_alias="ubicacion")
    zone: str = Field(..., serialization_alias="zona")
    date: str = Field(..., serialization_alias="fecha")
    time: str = Field(..., serialization_alias="hora")
    wristband_id: str = Field(..., serialization_alias="numero_brazalete")
    raw: str = Field(..., serialization_alias="cadena_original")
    processed_at: datetime = Field(..., serialization_alias="timestamp_procesamiento")
    verifying_operator: str = Field(UNKNOWN_OPERATOR, serialization_alias="usuario_verificador")

    @field_serializer("processed_at")
    def serialize_processed_at(self, value: datetime) -> str:
        """ISO-8601 in UTC with millisecond precision and a Z suffix."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def to_api_dict(self) -> dict[str, str]:
        """Serialise with the endpoint's field names."""
        return self.model_dump(by_alias=True, mode="json")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "evento": "1234",
                "ubicacion": "5678",
                "zona": "01",
                "fecha": "2024-01-15",
                "hora": "10:30",
                "numero_brazalete": "12345678",
                "cadena_original": "1234/5678/01/2024-01-15/10:30/12345678",
                "timestamp_procesamiento": "2024-01-15T10:31:02.123Z",
                "usuario_verificador": "checker@example.com",
            }
        }
