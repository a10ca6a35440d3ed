"""
Testimonial gateway
"""

from portfolio_api.models.testimonial import Testimonial
from portfolio_api.repositories.base import BaseRepository
from portfolio_api.schemas.testimonial import TestimonialEntity


class TestimonialRepository(BaseRepository[TestimonialEntity]):
    model = Testimonial
    entity = TestimonialEntity
    filter_fields = ("featured", "approved")
