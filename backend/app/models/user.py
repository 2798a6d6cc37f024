"""
User model for authentication and project ownership.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class User(BaseModel):
    """User model. Email is stored normalized to lower case."""
    __tablename__ = "users"
    
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    
    # Relationships
    projects = relationship("Project", back_populates="owner", order_by="Project.id")
    
    @property
    def name(self) -> str:
        """Full name as displayed in the UI."""
        return f"{self.first_name} {self.last_name}"
