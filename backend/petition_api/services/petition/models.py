from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class PetitionRequest(BaseModel):
    """
    Case details submitted by the petitioner.

    Required fields are enforced by the route after the rate-limit and
    credential checks, so every field is optional here.
    """
    model_config = ConfigDict(populate_by_name=True)

    case_number: Optional[str] = Field(None, alias="caseNumber", description="e.g. 2024고단123")
    defendant: Optional[str] = Field(None, description="Name of the accused")
    relationship: Optional[str] = Field(None, description="Relationship between victim and accused")
    damages: Optional[List[str]] = Field(None, description="Harm suffered by the victim")
    attitudes: Optional[List[str]] = Field(None, description="Offender's attitude after the incident")
    message: Optional[str] = Field(None, description="Free-text message to the court")
    is_victim: Optional[bool] = Field(None, alias="isVictim", description="Written by the victim (True) or a proxy")

    def missing_fields(self) -> List[str]:
        """Aliases of required fields that are absent or empty."""
        required = {
            "caseNumber": self.case_number,
            "defendant": self.defendant,
            "relationship": self.relationship,
        }
        return [name for name, value in required.items() if not value]


class UsageSummary(BaseModel):
    used: int
    remaining: int
    limit: int


class PetitionResponse(BaseModel):
    success: bool = True
    content: str
    usage: UsageSummary
