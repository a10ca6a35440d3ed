def test_settings_are_public_and_seeded(client):
    response = client.get("/api/settings")

    data = response.json()["data"]
    assert response.status_code == 200
    assert data["id"] == "main"
    assert data["theme"]["primaryColor"] == "#3b82f6"
    assert len(data["layout"]["sections"]) == 6


def test_settings_stay_a_singleton(client, editor_headers):
    first = client.get("/api/settings").json()["data"]
    client.put("/api/settings/general", json={"siteName": "Renamed"}, headers=editor_headers)
    second = client.get("/api/settings").json()["data"]

    assert first["id"] == second["id"] == "main"
    assert second["general"]["siteName"] == "Renamed"


def test_theme_update_touches_only_theme(client, editor_headers):
    before = client.get("/api/settings").json()["data"]

    response = client.put("/api/settings/theme", json={"primaryColor": "#112233"}, headers=editor_headers)

    after = response.json()["data"]
    assert response.status_code == 200
    assert response.json()["message"] == "Theme settings updated successfully"
    assert after["theme"]["primaryColor"] == "#112233"
    assert after["theme"]["secondaryColor"] == before["theme"]["secondaryColor"]
    for section in ("general", "contact", "layout", "seo"):
        assert after[section] == before[section]


def test_theme_rejects_bad_color(client, editor_headers):
    response = client.put("/api/settings/theme", json={"primaryColor": "blue"}, headers=editor_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"


def test_contact_rejects_bad_email(client, editor_headers):
    response = client.put("/api/settings/contact", json={"email": "nope"}, headers=editor_headers)

    assert response.status_code == 400


def test_full_update_merges_each_section(client, editor_headers):
    response = client.put(
        "/api/settings",
        json={"general": {"tagline": "New tagline"}, "seo": {"defaultTitle": "Home"}},
        headers=editor_headers,
    )

    data = response.json()["data"]
    assert data["general"]["tagline"] == "New tagline"
    assert data["general"]["siteName"] == "Portfolio"
    assert data["seo"]["defaultTitle"] == "Home"


def test_settings_mutations_need_editor(client, viewer_headers):
    assert client.put("/api/settings/theme", json={"darkMode": False}).status_code == 401
    assert client.put("/api/settings/theme", json={"darkMode": False}, headers=viewer_headers).status_code == 403


def test_layout_reorder_and_toggle(client, editor_headers):
    reordered = client.put(
        "/api/settings/layout/order",
        json={"sectionIds": ["contact", "hero"]},
        headers=editor_headers,
    ).json()["data"]
    toggled = client.post("/api/settings/layout/sections/about/toggle", headers=editor_headers).json()["data"]

    ids = [s["id"] for s in reordered["layout"]["sections"]]
    assert ids[:3] == ["contact", "hero", "about"]
    assert [s["order"] for s in reordered["layout"]["sections"]] == [1, 2, 3, 4, 5, 6]
    about = next(s for s in toggled["layout"]["sections"] if s["id"] == "about")
    assert about["enabled"] is False


def test_layout_toggle_unknown_section(client, editor_headers):
    response = client.post("/api/settings/layout/sections/footer/toggle", headers=editor_headers)

    assert response.status_code == 404


def test_seo_analyze(client, editor_headers):
    response = client.post(
        "/api/settings/seo/analyze",
        json={"title": "A" * 40, "description": "B" * 130, "keywords": ["a", "b", "c"]},
        headers=editor_headers,
    )

    report = response.json()["data"]
    assert report["score"] == 65
    assert report["status"] == "Good"
    assert {issue["type"] for issue in report["issues"]} <= {"error", "warning", "info"}
