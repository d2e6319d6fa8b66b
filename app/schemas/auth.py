from pydantic import BaseModel, EmailStr
from typing import Optional

# ======================
# TOKEN SCHEMAS
# ======================

class Token(BaseModel):
    access_token: str
    token_type: str
    role: str

class TokenData(BaseModel):
    email: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
