import math

import pytest
from sqlalchemy import text

from portfolio_api.repositories import (
    BlogPostRepository,
    ProjectRepository,
    TestimonialRepository,
)
from portfolio_api.schemas.blog import BlogPostCreate
from portfolio_api.schemas.common import ListFilters
from portfolio_api.schemas.project import ProjectCreate
from portfolio_api.schemas.testimonial import TestimonialCreate
from tests.factories import blog_payload, project_payload, review_payload


async def _create_projects(db, count, **overrides):
    repo = ProjectRepository(db)
    created = []
    for i in range(count):
        data = ProjectCreate.model_validate(project_payload(title=f"Project {i}", **overrides)).to_data()
        created.append(await repo.create(data))
    return created


async def test_project_round_trip(db):
    repo = ProjectRepository(db)
    data = ProjectCreate.model_validate(project_payload(featured=True, status="published")).to_data()

    created = await repo.create(data)
    found = await repo.find_by_id(created.id)

    assert found == created
    assert found.title == "Portfolio Site"
    assert found.technologies == ["Python", "FastAPI"]
    assert found.github_url == "https://github.com/example/site"
    assert found.featured is True
    assert found.status == "published"
    assert found.gallery == []
    assert found.metrics.views == 0


async def test_create_defaults_status_and_featured(db):
    (project,) = await _create_projects(db, 1)

    assert project.status == "draft"
    assert project.featured is False


async def test_partial_update_keeps_untouched_fields(db):
    (project,) = await _create_projects(db, 1)
    await db.execute(
        text("UPDATE projects SET updated_at = :stamp WHERE id = :id"),
        {"stamp": "2020-01-01 00:00:00.000000", "id": project.id},
    )
    await db.commit()
    repo = ProjectRepository(db)
    stale = await repo.find_by_id(project.id)

    updated = await repo.update(project.id, {"title": "Renamed"})

    assert updated.title == "Renamed"
    assert updated.description == project.description
    assert updated.technologies == project.technologies
    assert updated.created_at == project.created_at
    assert stale.updated_at.year == 2020
    assert updated.updated_at > stale.updated_at


async def test_empty_update_returns_entity_unchanged(db):
    (project,) = await _create_projects(db, 1)

    unchanged = await ProjectRepository(db).update(project.id, {})

    assert unchanged == project


async def test_update_unknown_id_returns_none(db):
    assert await ProjectRepository(db).update("missing", {"title": "x"}) is None


async def test_delete_reports_whether_a_row_was_removed(db):
    (project,) = await _create_projects(db, 1)
    repo = ProjectRepository(db)

    assert await repo.delete(project.id) is True
    assert await repo.find_by_id(project.id) is None
    assert await repo.delete(project.id) is False


async def test_pages_cover_every_row_once(db):
    await _create_projects(db, 5)
    repo = ProjectRepository(db)
    limit = 2

    total = await repo.count()
    seen = []
    for page in range(1, math.ceil(total / limit) + 1):
        seen.extend(p.id for p in await repo.find_all(ListFilters.page(page, limit)))

    assert total == 5
    assert len(seen) == total
    assert len(set(seen)) == total


async def test_offset_applies_without_limit(db):
    await _create_projects(db, 3)
    repo = ProjectRepository(db)

    everything = await repo.find_all()
    skipped = await repo.find_all(ListFilters(offset=1))

    assert [p.id for p in skipped] == [p.id for p in everything[1:]]


async def test_filters_and_count_agree(db):
    await _create_projects(db, 2, status="published")
    await _create_projects(db, 1, status="draft", featured=True)
    repo = ProjectRepository(db)

    published = await repo.find_all(ListFilters(status="published"))

    assert len(published) == 2
    assert await repo.count(ListFilters(status="published")) == 2
    assert await repo.count(ListFilters(featured=True)) == 1
    assert await repo.count() == 3


async def test_corrupt_json_column_reads_as_absent(db):
    (project,) = await _create_projects(db, 1)
    await db.execute(
        text("UPDATE projects SET gallery = :bad, technologies = :bad WHERE id = :id"),
        {"bad": "{not json", "id": project.id},
    )
    await db.commit()

    found = await ProjectRepository(db).find_by_id(project.id)

    assert found.gallery is None
    assert found.technologies == []


async def test_blog_post_without_seo_falls_back_to_title(db):
    repo = BlogPostRepository(db)
    data = BlogPostCreate.model_validate(blog_payload()).to_data()
    data["read_time"] = 1
    post = await repo.create(data)
    await db.execute(text("UPDATE blog_posts SET seo_data = NULL WHERE id = :id"), {"id": post.id})
    await db.commit()

    found = await repo.find_by_id(post.id)

    assert found.seo.meta_title == post.title
    assert found.seo.meta_description == post.excerpt


async def test_testimonials_filter_by_approved(db):
    repo = TestimonialRepository(db)
    await repo.create(TestimonialCreate.model_validate(review_payload(approved=True)).to_data())
    await repo.create(TestimonialCreate.model_validate(review_payload(approved=False)).to_data())

    approved = await repo.find_all(ListFilters(approved=True))

    assert len(approved) == 1
    assert approved[0].approved is True
    assert approved[0].rating == 5


async def test_unknown_field_is_rejected(db):
    data = ProjectCreate.model_validate(project_payload()).to_data()
    data["password"] = "x"

    with pytest.raises(KeyError):
        await ProjectRepository(db).create(data)


def test_page_offset_is_clamped():
    filters = ListFilters.page(10**20, 12)

    assert filters.limit == 12
    assert filters.offset < 2**63
