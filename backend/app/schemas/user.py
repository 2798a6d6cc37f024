"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    """Schema for sign-up. Presence is checked by the user service."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    password_confirmation: Optional[str] = None  # Checked only when sent


class UserResponse(BaseModel):
    """Schema for user response."""
    id: int
    first_name: str
    last_name: str
    name: str
    email: str
    created_at: datetime
    
    class Config:
        from_attributes = True


class UserLogin(BaseModel):
    """Schema for user login."""
    email: str
    password: str


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
