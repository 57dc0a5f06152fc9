"""Pytest configuration and fixtures for groqbuilder tests."""

from unittest.mock import patch

import pytest
from dotenv import load_dotenv

from groqbuilder.constants import FOLLOW, JOIN
from groqbuilder.querydsl import builder
from groqbuilder.settings import settings

# Load environment variables
load_dotenv()


@pytest.fixture(autouse=True)
def default_settings():
    """Pin query defaults so a local .env cannot change expected output."""
    with patch.object(settings, "GROQ_BASE_QUERY", "*"):
        with patch.object(settings, "GROQ_INCLUDE_DRAFTS", False):
            with patch.object(settings, "GROQ_DRAFTS_PATH", "drafts.**"):
                yield settings


@pytest.fixture
def base_state():
    """Fresh query with the draft-exclusion clause."""
    return builder.new()


@pytest.fixture
def drafts_state():
    """Fresh query that keeps drafts, so no clause is seeded."""
    return builder.new(include_drafts=True)


@pytest.fixture
def post_filters():
    """Post type filter plus an OR group on id / slug."""
    return [
        {"_type": "'post'"},
        [
            {"_id": "'some_id'"},
            {"slug.current": "'some_other_id'"},
            {JOIN: "||"},
        ],
    ]


@pytest.fixture
def author_projection():
    """Post fields plus an author object dereferenced through the reference."""
    return [
        "title",
        "body",
        {
            "'author'": [
                ["'_id'", ["author", "_id", FOLLOW]],
                ["'_type'", ["author", "_type", FOLLOW]],
                ["'name'", ["author", "name", FOLLOW]],
                ["'slug'", ["author", "slug", FOLLOW]],
                ["'image'", ["author", "image", FOLLOW]],
            ]
        },
    ]
