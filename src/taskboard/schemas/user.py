"""User schemas for API request/response."""

from pydantic import BaseModel, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class UserUpdate(BaseModel):
    """Schema for updating a user. Omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Email is required")
        return v


class UserRead(BaseModel):
    """Schema for reading a user."""

    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}
