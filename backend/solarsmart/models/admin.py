"""
Pydantic models for admin login.
"""

from pydantic import BaseModel


class LoginInput(BaseModel):
    password: str


class LoginOutput(BaseModel):
    token: str
