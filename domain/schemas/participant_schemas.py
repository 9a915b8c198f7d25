from pydantic import BaseModel, Field
from typing import Optional, Dict, List
from datetime import datetime


class ParticipantCreate(BaseModel):
    """Schema for registering a participant.

    Fields are optional at the schema level so that missing values are reported
    by the service as INVALID_INPUT rather than as a request-shape error.
    """

    name: Optional[str] = Field(None, description="Display name printed on the badge")
    mobile: Optional[str] = Field(None, description="Contact phone number")
    email: Optional[str] = Field(None, description="Email address; also the badge barcode")


class MealUpdateRequest(BaseModel):
    """Schema for marking or resetting a single meal cell"""

    day: Optional[str] = Field(None, description="Day identifier, e.g. 'day1'")
    meal_type: Optional[str] = Field(
        None, alias="mealType", description="Meal slot, e.g. 'lunch'"
    )

    model_config = {"populate_by_name": True}


class MealStateResponse(BaseModel):
    consumed: bool
    consumed_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ParticipantResponse(BaseModel):
    """Schema for a full participant record"""

    email: str
    name: str
    mobile: str
    meals: Dict[str, Dict[str, MealStateResponse]]
    created_at: datetime


class MobileParticipantResponse(BaseModel):
    """Compact participant view for handheld scanning stations"""

    email: str
    name: str
    mobile: str
    meals: Dict[str, Dict[str, MealStateResponse]]
    status: str = "success"


class StatsResponse(BaseModel):
    """Aggregate consumption figures across all participants"""

    total_participants: int
    total_meals_consumed: int
    total_possible_meals: int


class ResetAllResponse(BaseModel):
    message: str
    modified_count: int


class MealSchemaResponse(BaseModel):
    """The closed set of days and meal slots"""

    days: List[str]
    valid_meals: Dict[str, List[str]]
    cell_count: int


class AdminLoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class AdminUser(BaseModel):
    username: str


class AdminLoginResponse(BaseModel):
    message: str
    user: AdminUser
