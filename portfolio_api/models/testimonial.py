"""
Testimonial model
"""

from sqlalchemy import Column, String, Text, Boolean, DateTime, Integer

from portfolio_api.core.database import Base, generate_id, utcnow


class Testimonial(Base):
    """Client testimonial; only approved rows are public"""
    __tablename__ = "testimonials"

    id = Column(String(64), primary_key=True, default=generate_id)
    name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=False)
    company = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    rating = Column(Integer, default=5)
    avatar = Column(Text)
    featured = Column(Boolean, default=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    approved = Column(Boolean, default=False, index=True)

    def __repr__(self):
        return f"<Testimonial(id={self.id}, name={self.name})>"
