"""
Note model attached to a project.
"""
from sqlalchemy import Column, Text, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Note(BaseModel):
    """Note belonging to exactly one project."""
    __tablename__ = "notes"
    
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    message = Column(Text, nullable=False)
    
    # Relationships
    project = relationship("Project", back_populates="notes")
