from pydantic import BaseModel


class SignupRequest(BaseModel):
    username: str | None = None
    email: str = ""
    password: str = ""


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class Identity(BaseModel):
    username: str | None = None
    email: str

    model_config = {"from_attributes": True}


class UserRecordResponse(BaseModel):
    id: str
    username: str | None = None
    email: str

    model_config = {"from_attributes": True}
