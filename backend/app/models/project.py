"""
Project model owned by a single user.
"""
from sqlalchemy import Column, String, Date, DateTime, Text, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Project(BaseModel):
    """Project with a per-owner unique name and an optional completion timestamp."""
    __tablename__ = "projects"
    __table_args__ = (
        UniqueConstraint("owner_id", "name", name="uq_projects_owner_id_name"),
    )
    
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # Binary collation keeps name uniqueness case-sensitive on MySQL
    name = Column(String(200).with_variant(mysql.VARCHAR(200, collation="utf8mb4_bin"), "mysql"), nullable=False)
    description = Column(Text, nullable=True)
    due_on = Column(Date, nullable=True, index=True)
    completed_at = Column(DateTime, nullable=True)  # NULL while pending
    
    # Relationships
    owner = relationship("User", back_populates="projects")
    notes = relationship("Note", back_populates="project", order_by="Note.id", cascade="all, delete-orphan")
    
    @property
    def completed(self) -> bool:
        return self.completed_at is not None
