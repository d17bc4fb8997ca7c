# portfolio/core/domain/catalog.py
"""
Pure helpers over fetched project and post lists.
"""
from typing import Iterable, List, Optional

from portfolio.core.domain.models import BlogPost, Project


def derive_categories(projects: Iterable[Project]) -> List[str]:
    """
    Distinct, non-empty category labels across `projects`.

    Callers must not rely on ordering; first-seen order is used so the
    sidebar renders the same way for the same payload.
    """
    seen: List[str] = []
    for project in projects:
        category = project.category
        if category and category not in seen:
            seen.append(category)
    return seen


def filter_by_category(projects: List[Project], category: Optional[str]) -> List[Project]:
    """Projects in `category`; every project when no category is selected."""
    if not category:
        return list(projects)
    return [p for p in projects if p.category == category]


def derive_topics(posts: Iterable[BlogPost]) -> List[str]:
    """Distinct category names across `posts`, first-seen order."""
    topics: List[str] = []
    for post in posts:
        name = post.category_name
        if name and name not in topics:
            topics.append(name)
    return topics
