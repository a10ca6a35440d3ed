"""
Site settings model

A single row (id "main") with one JSON document per section, so each
section can be replaced without touching the others.
"""

from sqlalchemy import Column, String, DateTime

from portfolio_api.core.database import Base, JSONText, utcnow

SETTINGS_ID = "main"


class SiteSettings(Base):
    """Singleton site settings"""
    __tablename__ = "site_settings"

    id = Column(String(20), primary_key=True, default=SETTINGS_ID)
    general_settings = Column(JSONText())
    contact_settings = Column(JSONText())
    theme_settings = Column(JSONText())
    layout_settings = Column(JSONText())
    seo_settings = Column(JSONText())
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<SiteSettings(id={self.id})>"
