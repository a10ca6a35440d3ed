"""
User model
"""

from sqlalchemy import Column, String, Boolean, DateTime

from portfolio_api.core.database import Base, generate_id, utcnow


class User(Base):
    """CMS account"""
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=generate_id)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="editor")
    created_at = Column(DateTime, default=utcnow, nullable=False)
    last_login = Column(DateTime, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"
