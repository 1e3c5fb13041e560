from pydantic import BaseModel, Field, field_validator


class UserRegister(BaseModel):
    """Schema for registering a new account"""

    username: str = Field(..., min_length=1, max_length=64)
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str) -> str:
        v = v.strip()
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v


class LoginRequest(BaseModel):
    """Credentials for logging in with either username or email"""

    username_or_email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
