"""Shared fixtures for slug service tests."""

import pytest

from slugkit.config import SlugSettings
from slugkit.repositories.memory_slug_repository import InMemorySlugRepository
from slugkit.services.slug_service import SlugService


@pytest.fixture
def preserve_service():
    return SlugService(SlugSettings(preserve_original=True))


@pytest.fixture
def manual_service():
    return SlugService(SlugSettings(preserve_original=False, use_intl=False))


@pytest.fixture
def intl_service():
    return SlugService(SlugSettings(preserve_original=False, use_intl=True))


@pytest.fixture(params=["manual", "intl"])
def ascii_service(request):
    return SlugService(SlugSettings(preserve_original=False, use_intl=request.param == "intl"))


@pytest.fixture
def memory_repo():
    return InMemorySlugRepository()
