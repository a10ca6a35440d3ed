"""
Blog post model
"""

from sqlalchemy import Column, String, Text, Boolean, DateTime, Integer

from portfolio_api.core.database import Base, JSONText, generate_id, utcnow


class BlogPost(Base):
    """Blog post (markdown content)"""
    __tablename__ = "blog_posts"

    id = Column(String(64), primary_key=True, default=generate_id)
    title = Column(String(200), nullable=False)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    author = Column(String(100), nullable=False)
    published_at = Column(DateTime)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
    status = Column(String(20), default="draft", index=True)
    featured = Column(Boolean, default=False, index=True)
    tags = Column(JSONText())
    read_time = Column(Integer, default=5)
    image = Column(Text)
    seo_data = Column(JSONText())

    def __repr__(self):
        return f"<BlogPost(id={self.id}, title={self.title})>"
