"""
SEO scoring

Weighted presence and length checks over page metadata, capped at 100.
"""

from typing import List

from portfolio_api.schemas.blog import BlogPostEntity
from portfolio_api.schemas.settings import SeoCheckRequest, SeoIssue, SeoReport

TITLE_RANGE = (30, 60)
DESCRIPTION_RANGE = (120, 160)
KEYWORD_RANGE = (3, 10)


def score_status(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Needs Improvement"
    return "Poor"


def score_seo(page: SeoCheckRequest) -> SeoReport:
    score = 0
    issues: List[SeoIssue] = []

    if page.title:
        score += 15
        if TITLE_RANGE[0] <= len(page.title) <= TITLE_RANGE[1]:
            score += 10
        else:
            issues.append(SeoIssue(type="warning", message=f"Title should be 30-60 characters (current: {len(page.title)})"))
    else:
        issues.append(SeoIssue(type="error", message="Missing page title"))

    if page.description:
        score += 15
        if DESCRIPTION_RANGE[0] <= len(page.description) <= DESCRIPTION_RANGE[1]:
            score += 10
        else:
            issues.append(SeoIssue(
                type="warning",
                message=f"Description should be 120-160 characters (current: {len(page.description)})",
            ))
    else:
        issues.append(SeoIssue(type="error", message="Missing meta description"))

    if page.keywords:
        score += 10
        if KEYWORD_RANGE[0] <= len(page.keywords) <= KEYWORD_RANGE[1]:
            score += 5
        else:
            issues.append(SeoIssue(type="warning", message=f"Recommended 3-10 keywords (current: {len(page.keywords)})"))
    else:
        issues.append(SeoIssue(type="warning", message="No keywords defined"))

    if page.og_title and page.og_description:
        score += 15
    else:
        issues.append(SeoIssue(type="warning", message="Missing Open Graph data"))

    if page.og_image:
        score += 10
    else:
        issues.append(SeoIssue(type="warning", message="Missing Open Graph image"))

    if page.twitter_title and page.twitter_description:
        score += 10
    else:
        issues.append(SeoIssue(type="info", message="Consider adding Twitter Card data"))

    if page.canonical_url:
        score += 10
    else:
        issues.append(SeoIssue(type="warning", message="Missing canonical URL"))

    if page.structured_data:
        score += 15
    else:
        issues.append(SeoIssue(type="info", message="Consider adding structured data"))

    score = min(score, 100)
    return SeoReport(score=score, status=score_status(score), issues=issues)


def score_blog_post(post: BlogPostEntity) -> SeoReport:
    """Score a post using its SEO block, with the post image as OG image"""
    return score_seo(SeoCheckRequest(
        title=post.seo.meta_title,
        description=post.seo.meta_description,
        keywords=post.seo.keywords,
        og_title=post.seo.meta_title,
        og_description=post.excerpt,
        og_image=post.image,
    ))
