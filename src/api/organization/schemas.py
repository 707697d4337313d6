"""Organization API schemas."""

from decimal import Decimal

from pydantic import (
    BaseModel,
    EmailStr,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

_http_url = TypeAdapter(HttpUrl)


class OrganizationSignupRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    email: EmailStr
    phone_number: str | None = Field(None, max_length=32)
    url: str = Field(..., max_length=256)
    location_name: str = Field(..., min_length=1, max_length=256)
    latitude: Decimal | None = Field(None, ge=-90, le=90)
    longitude: Decimal | None = Field(None, ge=-180, le=180)

    @field_validator("name", "location_name", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("phone_number", mode="before")
    @classmethod
    def blank_phone_is_none(cls, value):
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("email")
    @classmethod
    def email_length(cls, value: str) -> str:
        if len(value) > 128:
            raise ValueError("Email must be at most 128 characters")
        return value

    @field_validator("url")
    @classmethod
    def http_url(cls, value: str) -> str:
        """Must parse as an http(s) URL; the submitted text is what gets stored."""
        value = value.strip()
        try:
            _http_url.validate_python(value)
        except ValidationError as e:
            raise ValueError("URL must be a valid http or https address") from e
        return value


class OrganizationSignupResponse(BaseModel):
    """Empty object: the signup outcome is carried by the status code."""
