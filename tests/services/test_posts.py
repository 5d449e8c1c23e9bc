# tests/services/test_posts.py
"""Tests for the post registry."""

import pytest

from stakeguard.models.engine_state import get_engine_state
from stakeguard.models.post import (
    POST_STATUS_ACTIVE,
    POST_STATUS_FLAGGED,
    POST_STATUS_REMOVED,
)
from stakeguard.services.errors import InvalidContentRefError, PostNotFoundError
from stakeguard.services.posts import PostRegistry


@pytest.fixture()
def registry(db_session) -> PostRegistry:
    return PostRegistry(db_session)


def test_create_post_allocates_sequential_ids(registry, db_session) -> None:
    first = registry.create_post("alice", b"\x01" * 64, 7)
    second = registry.create_post("bob", b"\x02" * 32, 8)

    assert (first.id, second.id) == (1, 2)
    assert get_engine_state(db_session).next_post_id == 3


def test_create_post_defaults(registry) -> None:
    post = registry.create_post("alice", b"\xaa" * 64, 42)

    assert post.author == "alice"
    assert post.content_ref == b"\xaa" * 64
    assert post.created_at == 42
    assert post.status == POST_STATUS_ACTIVE
    assert post.report_count == 0


def test_create_post_rejects_oversized_content_ref(registry, db_session) -> None:
    with pytest.raises(InvalidContentRefError):
        registry.create_post("alice", b"\x00" * 65, 0)
    assert get_engine_state(db_session).next_post_id == 1


def test_status_transitions(registry) -> None:
    post = registry.create_post("alice", b"\x01", 0)

    assert registry.mark_flagged(post.id).status == POST_STATUS_FLAGGED
    assert registry.mark_removed(post.id).status == POST_STATUS_REMOVED
    assert registry.mark_active(post.id).status == POST_STATUS_ACTIVE


@pytest.mark.parametrize("method", ["mark_flagged", "mark_removed", "mark_active", "get_post"])
def test_unknown_post_raises_not_found(registry, method) -> None:
    with pytest.raises(PostNotFoundError):
        getattr(registry, method)(999)


def test_increment_report_count(registry) -> None:
    post = registry.create_post("alice", b"\x01", 0)
    registry.increment_report_count(post.id)
    registry.increment_report_count(post.id)
    assert registry.get_post(post.id).report_count == 2

    with pytest.raises(PostNotFoundError):
        registry.increment_report_count(999)
