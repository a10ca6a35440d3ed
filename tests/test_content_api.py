from tests.factories import blog_payload, project_payload, review_payload


def _create(client, path, payload, headers):
    response = client.post(path, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_health_and_index(client):
    health = client.get("/health").json()
    index = client.get("/api").json()

    assert health["success"] is True
    assert health["environment"] == "test"
    assert index["endpoints"]["projects"] == "/api/projects"


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_project_crud(client, editor_headers):
    created = _create(client, "/api/projects", project_payload(status="published"), editor_headers)
    project_id = created["id"]

    assert created["technologies"] == ["Python", "FastAPI"]
    assert created["featured"] is False
    assert "createdAt" in created and "updatedAt" in created

    updated = client.put(f"/api/projects/{project_id}", json={"featured": True}, headers=editor_headers)
    assert updated.status_code == 200
    assert updated.json()["data"]["featured"] is True
    assert updated.json()["data"]["title"] == created["title"]
    assert updated.json()["data"]["createdAt"] == created["createdAt"]

    fetched = client.get(f"/api/projects/{project_id}", headers=editor_headers)
    assert fetched.json()["data"]["featured"] is True

    deleted = client.delete(f"/api/projects/{project_id}", headers=editor_headers)
    missing = client.delete(f"/api/projects/{project_id}", headers=editor_headers)
    assert deleted.json() == {"success": True, "message": "Project deleted successfully"}
    assert missing.status_code == 404
    assert missing.json() == {"success": False, "error": "Project not found"}


def test_project_validation(client, editor_headers):
    response = client.post(
        "/api/projects",
        json=project_payload(technologies=[], githubUrl="not a url"),
        headers=editor_headers,
    )

    body = response.json()
    assert response.status_code == 400
    assert body["error"] == "Validation failed"
    assert {d["field"] for d in body["details"]} == {"technologies", "githubUrl"}


def test_update_rejects_null_for_required_field(client, editor_headers):
    project = _create(client, "/api/projects", project_payload(), editor_headers)

    response = client.put(f"/api/projects/{project['id']}", json={"title": None}, headers=editor_headers)

    assert response.status_code == 400


def test_viewer_cannot_mutate(client, viewer_headers):
    response = client.post("/api/projects", json=project_payload(), headers=viewer_headers)

    assert response.status_code == 403
    assert response.json()["error"] == "Editor access required"


def test_viewer_can_read_protected_listing(client, viewer_headers):
    assert client.get("/api/projects", headers=viewer_headers).status_code == 200
    assert client.get("/api/projects").status_code == 401


def test_public_listings_only_show_published(client, editor_headers):
    _create(client, "/api/projects", project_payload(title="Live", status="published", featured=True), editor_headers)
    draft = _create(client, "/api/projects", project_payload(title="Hidden", featured=True), editor_headers)

    featured = client.get("/api/projects/featured").json()["data"]
    published = client.get("/api/projects/published").json()
    hidden = client.get(f"/api/projects/published/{draft['id']}")

    assert [p["title"] for p in featured] == ["Live"]
    assert [p["title"] for p in published["data"]] == ["Live"]
    assert published["pagination"] == {"page": 1, "limit": 12, "total": 1, "totalPages": 1}
    assert hidden.status_code == 404


def test_listing_pagination(client, editor_headers):
    for i in range(5):
        _create(client, "/api/projects", project_payload(title=f"P{i}"), editor_headers)

    pages = [
        client.get("/api/projects", params={"page": page, "limit": 2}, headers=editor_headers).json()
        for page in (1, 2, 3)
    ]

    assert [len(p["data"]) for p in pages] == [2, 2, 1]
    assert pages[0]["pagination"] == {"page": 1, "limit": 2, "total": 5, "totalPages": 3}
    ids = [item["id"] for p in pages for item in p["data"]]
    assert len(set(ids)) == 5


def test_listing_rejects_bad_paging(client, editor_headers):
    assert client.get("/api/projects", params={"page": 0}, headers=editor_headers).status_code == 400
    assert client.get("/api/projects", params={"limit": 101}, headers=editor_headers).status_code == 400


def test_project_stats_need_editor(client, editor_headers, viewer_headers):
    _create(client, "/api/projects", project_payload(status="published"), editor_headers)

    assert client.get("/api/projects/stats", headers=viewer_headers).status_code == 403
    stats = client.get("/api/projects/stats", headers=editor_headers).json()["data"]
    assert stats == {"total": 1, "published": 1, "draft": 0, "featured": 0}


def test_blog_post_flow(client, editor_headers):
    post = _create(client, "/api/blog", blog_payload(content="word " * 400, status="published"), editor_headers)

    assert post["readTime"] == 2
    assert post["publishedAt"]
    assert post["seo"]["metaTitle"] == "Hello"

    public = client.get(f"/api/blog/published/{post['id']}")
    assert public.status_code == 200

    score = client.get(f"/api/blog/{post['id']}/seo-score", headers=editor_headers).json()["data"]
    assert 0 <= score["score"] <= 100
    assert score["status"] in {"Excellent", "Good", "Needs Improvement", "Poor"}


def test_blog_requires_seo_block(client, editor_headers):
    payload = blog_payload()
    del payload["seo"]

    response = client.post("/api/blog", json=payload, headers=editor_headers)

    assert response.status_code == 400


def test_testimonials_public_views(client, editor_headers):
    _create(client, "/api/testimonials", review_payload(name="Shown", approved=True, featured=True), editor_headers)
    _create(client, "/api/testimonials", review_payload(name="Pending", featured=True), editor_headers)

    featured = client.get("/api/testimonials/featured").json()["data"]
    approved = client.get("/api/testimonials/approved").json()
    stats = client.get("/api/testimonials/stats", headers=editor_headers).json()["data"]

    assert [t["name"] for t in featured] == ["Shown"]
    assert approved["pagination"]["total"] == 1
    assert stats == {"total": 2, "approved": 1, "pending": 1, "featured": 2}


def test_testimonial_rating_bounds(client, editor_headers):
    response = client.post("/api/testimonials", json=review_payload(rating=6), headers=editor_headers)

    assert response.status_code == 400


def test_timestamps_carry_utc_offset(client, editor_headers):
    created = _create(client, "/api/projects", project_payload(), editor_headers)

    for field in ("createdAt", "updatedAt"):
        assert created[field].endswith(("Z", "+00:00")), created[field]


def test_huge_page_returns_empty_listing(client, editor_headers):
    _create(client, "/api/projects", project_payload(status="published"), editor_headers)

    response = client.get("/api/projects/published", params={"page": 10**20})

    assert response.status_code == 200
    assert response.json()["data"] == []
    assert response.json()["pagination"]["total"] == 1


def test_responses_carry_security_headers(client):
    response = client.get("/api/projects/published")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert response.headers["Referrer-Policy"] == "no-referrer"
    assert "default-src 'self'" in response.headers["Content-Security-Policy"]
