from pydantic import BaseModel, EmailStr, Field, constr


class SignupRequest(BaseModel):
    username: constr(strip_whitespace=True, min_length=1, max_length=50)
    email: EmailStr
    # kept verbatim so the stored hash matches what /login receives
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    token: str


class UsernameResponse(BaseModel):
    username: str
