from pydantic import BaseModel, ConfigDict
from typing import Optional

# inputs stay loose: presence/emptiness is checked by the service
class RegisterIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    email: str

class AuthOut(BaseModel):
    message: str
    user: UserOut
