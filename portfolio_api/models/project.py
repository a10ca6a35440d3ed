"""
Portfolio project model
"""

from sqlalchemy import Column, String, Text, Boolean, DateTime

from portfolio_api.core.database import Base, JSONText, generate_id, utcnow


class Project(Base):
    """Portfolio project"""
    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, default=generate_id)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    long_description = Column(Text)
    technologies = Column(JSONText(), nullable=False)
    image = Column(Text)
    gallery = Column(JSONText())
    github_url = Column(Text)
    live_url = Column(Text)
    status = Column(String(20), default="draft", index=True)
    featured = Column(Boolean, default=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
    collaborators = Column(JSONText())
    metrics = Column(JSONText())

    def __repr__(self):
        return f"<Project(id={self.id}, title={self.title})>"
