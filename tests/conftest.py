"""Shared fixtures for post graph tests."""

from datetime import date
from typing import Any, Callable, Dict

import pytest


@pytest.fixture
def make_post() -> Callable[..., Dict[str, Any]]:
    """Factory for raw post payloads as supplied by content ingestion."""

    def factory(slug: str, post_date: str, *tags: str, **extra: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "slug": slug,
            "title": extra.pop("title", slug.replace("-", " ").title()),
            "date": post_date,
            "tags": list(tags),
        }
        payload.update(extra)
        return payload

    return factory


@pytest.fixture
def today() -> date:
    return date(2025, 1, 10)
