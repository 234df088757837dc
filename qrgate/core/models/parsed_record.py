"""
ParsedRecord model representing a decoded wristband code (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from qrgate.core.validators import parse_calendar_date, parse_hour_minute


class ParsedRecord(BaseModel):
    """
    The six fields of a wristband code plus the string they came from.

    Instances only exist for codes whose fields pass every hard rule;
    construction re-checks each field so an invalid record cannot be built
    by hand either. Records are frozen once created.

    Attributes:
        event: Event code (4 digits)
        location: Location code (4 digits)
        zone: Zone code (2 digits)
        date: Event date, ideally YYYY-MM-DD
        time: Event time, ideally HH:MM
        wristband_id: Wristband number (8 digits)
        raw: Trimmed segments re-joined with '/'
    """

    event: str = Field(..., pattern=r"^[0-9]{4}$")
    location: str = Field(..., pattern=r"^[0-9]{4}$")
    zone: str = Field(..., pattern=r"^[0-9]{2}$")
    date: str = Field(..., min_length=1)
    time: str = Field(..., min_length=1)
    wristband_id: str = Field(..., pattern=r"^[0-9]{8}$")
    raw: str = Field(..., min_length=1)

    @field_validator("date")
    @classmethod
    def check_calendar_date(cls, v):
        """Validate that the date names a real calendar day."""
        if parse_calendar_date(v) is None:
            raise ValueError(f'Invalid date: "{v}"')
        return v

    @field_validator("time")
    @classmethod
    def check_time_of_day(cls, v):
        """Validate hour in [0, 23] and minute in [0, 59]."""
        if parse_hour_minute(v) is None:
            raise ValueError(f'Invalid time: "{v}"')
        return v

    @model_validator(mode="after")
    def check_raw_matches_fields(self):
        """Validate that raw is exactly the six fields joined with '/'."""
        expected = "/".join(self.field_values().values())
        if self.raw != expected:
            raise ValueError(f'raw "{self.raw}" does not match fields "{expected}"')
        return self

    def field_values(self) -> dict[str, str]:
        """Return the six decoded fields in layout order."""
        return {
            "event": self.event,
            "location": self.location,
            "zone": self.zone,
            "date": self.date,
            "time": self.time,
            "wristband_id": self.wristband_id,
        }

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "event": "1234",
                "location": "5678",
                "zone": "01",
                "date": "2024-01-15",
                "time": "10:30",
                "wristband_id": "12345678",
                "raw": "1234/5678/01/2024-01-15/10:30/12345678",
            }
        }
