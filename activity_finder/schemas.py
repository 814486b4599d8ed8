from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


REQUIRED_FIELDS = ("city", "kidsAges", "availability", "travelDistance")


class ActivityRequest(BaseModel):
    """Search form submitted by the client. Wire names are camelCase."""

    city: Optional[str] = None
    kids_ages: Optional[str] = Field(default=None, alias="kidsAges")
    availability: Optional[str] = None
    travel_distance: Optional[str] = Field(default=None, alias="travelDistance")
    preferences: Optional[str] = None

    class Config:
        extra = "ignore"
        populate_by_name = True
        coerce_numbers_to_str = True

    def missing_fields(self) -> List[str]:
        values = self.model_dump(by_alias=True)
        return [name for name in REQUIRED_FIELDS if not (values.get(name) or "").strip()]


class Activity(BaseModel):
    """A single activity recommendation."""

    id: int = Field(ge=1)
    title: str
    description: str

    class Config:
        frozen = True


class ActivityResponse(BaseModel):
    success: bool = True
    activities: List[Activity] = Field(default_factory=list, max_length=5)
    count: int = 0
    note: Optional[str] = None

    @classmethod
    def from_activities(cls, activities: List[Activity], note: str | None = None) -> "ActivityResponse":
        return cls(success=True, activities=activities, count=len(activities), note=note)
