"""Request payload builders shared by the tests"""


def project_payload(**overrides) -> dict:
    payload = {
        "title": "Portfolio Site",
        "description": "A personal site",
        "technologies": ["Python", "FastAPI"],
        "image": "/uploads/cover.png",
        "githubUrl": "https://github.com/example/site",
    }
    payload.update(overrides)
    return payload


def blog_payload(**overrides) -> dict:
    payload = {
        "title": "Hello World",
        "excerpt": "First post",
        "content": "word " * 50,
        "author": "Admin",
        "tags": ["intro"],
        "seo": {"metaTitle": "Hello", "metaDescription": "The first post"},
    }
    payload.update(overrides)
    return payload


def review_payload(**overrides) -> dict:
    payload = {
        "name": "Jane Doe",
        "role": "CTO",
        "company": "Acme",
        "content": "Great work",
    }
    payload.update(overrides)
    return payload
