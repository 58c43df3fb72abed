"""Alert models following the CAP vocabulary used by the API."""

from enum import StrEnum

from pydantic import Field

from weathergov.models.common import ApiModel, Pagination, Timestamp


class AlertStatus(StrEnum):
    ACTUAL = "Actual"
    EXERCISE = "Exercise"
    SYSTEM = "System"
    TEST = "Test"
    DRAFT = "Draft"


class AlertMessageType(StrEnum):
    ALERT = "Alert"
    UPDATE = "Update"
    CANCEL = "Cancel"
    ACK = "Ack"
    ERROR = "Error"


class AlertCategory(StrEnum):
    MET = "Met"
    GEO = "Geo"
    SAFETY = "Safety"
    SECURITY = "Security"
    RESCUE = "Rescue"
    FIRE = "Fire"
    HEALTH = "Health"
    ENV = "Env"
    TRANSPORT = "Transport"
    INFRA = "Infra"
    CBRNE = "CBRNE"
    OTHER = "Other"


class AlertSeverity(StrEnum):
    EXTREME = "Extreme"
    SEVERE = "Severe"
    MODERATE = "Moderate"
    MINOR = "Minor"
    UNKNOWN = "Unknown"


class AlertCertainty(StrEnum):
    OBSERVED = "Observed"
    LIKELY = "Likely"
    POSSIBLE = "Possible"
    UNLIKELY = "Unlikely"
    UNKNOWN = "Unknown"


class AlertUrgency(StrEnum):
    IMMEDIATE = "Immediate"
    EXPECTED = "Expected"
    FUTURE = "Future"
    PAST = "Past"
    UNKNOWN = "Unknown"


class AlertResponse(StrEnum):
    SHELTER = "Shelter"
    EVACUATE = "Evacuate"
    PREPARE = "Prepare"
    EXECUTE = "Execute"
    AVOID = "Avoid"
    MONITOR = "Monitor"
    ASSESS = "Assess"
    ALL_CLEAR = "AllClear"
    NONE = "None"


class AlertReference(ApiModel):
    id: str = Field(alias="@id")
    identifier: str
    sender: str
    sent: Timestamp


class Geocode(ApiModel):
    same: list[str] | None = Field(default=None, alias="SAME")
    ugc: list[str] | None = Field(default=None, alias="UGC")


class Alert(ApiModel):
    id: str
    area_desc: str
    geocode: Geocode
    affected_zones: list[str]
    references: list[AlertReference]
    sent: Timestamp
    effective: Timestamp
    onset: Timestamp | None = None
    expires: Timestamp
    ends: Timestamp | None = None
    status: AlertStatus
    message_type: AlertMessageType
    category: AlertCategory
    severity: AlertSeverity
    certainty: AlertCertainty
    urgency: AlertUrgency
    event: str
    sender: str
    sender_name: str
    headline: str | None = None
    description: str
    instruction: str | None = None
    response: AlertResponse
    parameters: dict[str, list[str]] | None = None


class AlertFeature(ApiModel):
    id: str | None = None
    properties: Alert


class AlertCollection(ApiModel):
    title: str | None = None
    updated: Timestamp | None = None
    features: list[AlertFeature]
    pagination: Pagination | None = None

    @property
    def alerts(self) -> list[Alert]:
        return [f.properties for f in self.features]


class AlertCount(ApiModel):
    total: int
    land: int
    marine: int
    regions: dict[str, int]
    areas: dict[str, int]
    zones: dict[str, int]


class AlertTypes(ApiModel):
    event_types: list[str]
