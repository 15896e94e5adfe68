from typing import Any

from pydantic import BaseModel, Field


class BudgetRequest(BaseModel):
    """Inbound estimate body. Completeness is checked by the request validator."""
    destination: Any = None
    travel_style: Any = Field(default=None, alias="travelStyle")
    travel_mode: Any = Field(default=None, alias="travelMode")
    people: Any = None
    days: Any = None

    model_config = {"extra": "allow"}

    def received(self) -> dict[str, Any]:
        """The fields the client actually sent, under their wire names."""
        sent = self.model_dump(by_alias=True, exclude_unset=True)
        sent.update(self.model_extra or {})
        return sent


class TripRequest(BaseModel):
    destination: str
    travel_style: str = Field(alias="travelStyle")
    travel_mode: str = Field(alias="travelMode")
    people: int = Field(ge=1)
    days: int = Field(ge=1)

    model_config = {"populate_by_name": True, "frozen": True}


class BudgetBreakdown(BaseModel):
    travel: int = Field(alias="Travel")
    stay: int = Field(alias="Stay")
    food: int = Field(alias="Food")
    activities: int = Field(alias="Activities")
    local_transport: int = Field(alias="LocalTransport")
    miscellaneous: int = Field(alias="Miscellaneous")

    model_config = {"populate_by_name": True}

    @property
    def total(self) -> int:
        return (
            self.travel
            + self.stay
            + self.food
            + self.activities
            + self.local_transport
            + self.miscellaneous
        )


class BudgetDetails(BaseModel):
    destination: str
    region: str
    cost_multiplier: float = Field(alias="costMultiplier")
    travel_style: str = Field(alias="travelStyle")
    travel_mode: str = Field(alias="travelMode")
    people: int
    days: int
    currency: str
    total: int

    model_config = {"populate_by_name": True}


class BudgetResponse(BaseModel):
    budget: BudgetBreakdown
    details: BudgetDetails


class ValidationErrorResponse(BaseModel):
    error: str
    required: list[str]
    received: Any = None
    fields: list[str] = []


class ServerErrorResponse(BaseModel):
    error: str
    details: str
