from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class BreachRecord(BaseModel):
    """One breach entry returned by the breached-account endpoint."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    domain: str = Field("", alias="Domain")
    is_verified: bool = Field(False, alias="IsVerified")
    description: str = Field("", alias="Description")
    pwn_count: int = Field(0, ge=0, alias="PwnCount")

    name: Optional[str] = Field(None, alias="Name")
    title: Optional[str] = Field(None, alias="Title")


class RangeEntry(BaseModel):
    """One `SUFFIX:COUNT` line of a k-anonymity range response."""
    hash_suffix: str
    count: int = Field(..., ge=0)


class Alert(BaseModel):
    title: str
    html_message: str
