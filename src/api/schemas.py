"""Pydantic request models for the JSON API.

Field aliases are the camelCase names the browser client sends.
"""
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _clean_skills(v):
    """Strip blanks and surrounding whitespace from a skill list."""
    if isinstance(v, list):
        return [item.strip() for item in v if isinstance(item, str) and item.strip()]
    return v


SkillList = Annotated[list[str], BeforeValidator(_clean_skills)]


class RegisterRequest(_Request):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginRequest(_Request):
    email: str
    password: str


class ProfileUpdateRequest(_Request):
    """Partial profile update; omitted fields are left unchanged."""
    name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    linkedin_url: Optional[str] = Field(default=None, alias="linkedinUrl")
    skills: Optional[SkillList] = None
    wallet_address: Optional[str] = Field(default=None, alias="walletAddress")


class JobCreateRequest(_Request):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    budget: float = Field(ge=0)
    location: Optional[str] = None
    skills: SkillList = Field(default_factory=list)
    job_type: Literal["full-time", "part-time", "contract", "freelance"] = Field(
        default="full-time", alias="jobType"
    )
    experience_level: Literal["entry", "intermediate", "senior", "expert"] = Field(
        default="intermediate", alias="experienceLevel"
    )
    payment_tx_hash: Optional[str] = Field(default=None, alias="paymentTxHash")


class PostCreateRequest(_Request):
    content: str = Field(min_length=1)


class CommentCreateRequest(_Request):
    content: str = Field(min_length=1)
