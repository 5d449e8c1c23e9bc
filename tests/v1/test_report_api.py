# tests/v1/test_report_api.py
"""Tests for the post, report, reputation and system endpoints."""

import pytest
from fastapi import status

from stakeguard.services.clock import DatabaseClock
from tests.conftest import AUTHOR, REPORTER, STARTING_BALANCE

CONTENT_HEX = "ab" * 64


@pytest.fixture()
def clock(db_session) -> DatabaseClock:
    return DatabaseClock(db_session)


@pytest.fixture()
def post_id(client, auth_headers, fund) -> int:
    fund(REPORTER, STARTING_BALANCE)
    response = client.post(
        "/api/v1/posts/",
        json={"content_ref_hex": CONTENT_HEX},
        headers=auth_headers(AUTHOR),
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["id"]


@pytest.fixture()
def report_id(client, auth_headers, post_id, test_settings) -> int:
    response = client.post(
        "/api/v1/reports/",
        json={"post_id": post_id, "reason": "spam", "stake": test_settings.min_stake_amount},
        headers=auth_headers(REPORTER),
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["id"]


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_create_and_get_post(client, post_id) -> None:
    response = client.get(f"/api/v1/posts/{post_id}")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["author"] == AUTHOR
    assert data["content_ref_hex"] == CONTENT_HEX
    assert data["status"] == "active"
    assert data["report_count"] == 0


def test_create_post_requires_token(client) -> None:
    response = client.post("/api/v1/posts/", json={"content_ref_hex": CONTENT_HEX})
    assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)


def test_create_post_rejects_bad_token(client) -> None:
    response = client.post(
        "/api/v1/posts/",
        json={"content_ref_hex": CONTENT_HEX},
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_create_post_rejects_invalid_hex(client, auth_headers) -> None:
    response = client.post(
        "/api/v1/posts/",
        json={"content_ref_hex": "zz"},
        headers=auth_headers(AUTHOR),
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_get_missing_post(client) -> None:
    response = client.get("/api/v1/posts/999")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_file_report_flags_post(client, post_id, report_id, test_settings) -> None:
    report = client.get(f"/api/v1/reports/{report_id}").json()
    assert report["reporter"] == REPORTER
    assert report["phase"] == "open"
    assert report["voting_deadline"] == test_settings.voting_period

    post = client.get(f"/api/v1/posts/{post_id}").json()
    assert post["status"] == "flagged"
    assert post["report_count"] == 1


def test_file_report_below_minimum(client, auth_headers, post_id) -> None:
    response = client.post(
        "/api/v1/reports/",
        json={"post_id": post_id, "reason": "spam", "stake": 1},
        headers=auth_headers(REPORTER),
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_file_report_unfunded(client, auth_headers, post_id, test_settings) -> None:
    response = client.post(
        "/api/v1/reports/",
        json={"post_id": post_id, "reason": "spam", "stake": test_settings.min_stake_amount},
        headers=auth_headers("broke"),
    )
    assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED


def test_non_moderator_vote_forbidden(
    client, auth_headers, report_id, fund, test_settings
) -> None:
    fund("regular", STARTING_BALANCE)
    response = client.post(
        f"/api/v1/reports/{report_id}/votes",
        json={"choice": True, "stake": test_settings.min_stake_amount},
        headers=auth_headers("regular"),
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_promote_requires_reputation(client, auth_headers) -> None:
    response = client.post("/api/v1/reputation/promote", headers=auth_headers("newcomer"))
    assert response.status_code == status.HTTP_403_FORBIDDEN

    record = client.get("/api/v1/reputation/newcomer").json()
    assert record == {"principal": "newcomer", "score": 100, "is_moderator": False}


def test_promote_once_eligible(client, auth_headers, report_engine, test_settings) -> None:
    report_engine.reputation.apply_delta("veteran", test_settings.moderator_threshold)
    report_engine.db.commit()

    response = client.post("/api/v1/reputation/promote", headers=auth_headers("veteran"))
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["is_moderator"] is True


def test_full_lifecycle_over_http(
    client, auth_headers, make_moderator, post_id, report_id, clock, test_settings
) -> None:
    """Vote, wait out the window, resolve, and observe the outcome."""
    stake = test_settings.min_stake_amount
    for name, choice in [("mod-a", True), ("mod-b", True), ("mod-c", False)]:
        make_moderator(name)
        response = client.post(
            f"/api/v1/reports/{report_id}/votes",
            json={"choice": choice, "stake": stake},
            headers=auth_headers(name),
        )
        assert response.status_code == status.HTTP_201_CREATED

    duplicate = client.post(
        f"/api/v1/reports/{report_id}/votes",
        json={"choice": False, "stake": stake},
        headers=auth_headers("mod-a"),
    )
    assert duplicate.status_code == status.HTTP_409_CONFLICT

    early = client.post(f"/api/v1/reports/{report_id}/resolve", headers=auth_headers("anyone"))
    assert early.status_code == status.HTTP_409_CONFLICT

    clock.advance(test_settings.voting_period)
    assert client.get(f"/api/v1/reports/{report_id}").json()["phase"] == "voting_closed"

    late_vote = client.post(
        f"/api/v1/reports/{report_id}/votes",
        json={"choice": True, "stake": stake},
        headers=auth_headers("mod-c"),
    )
    assert late_vote.status_code == status.HTTP_409_CONFLICT

    resolved = client.post(f"/api/v1/reports/{report_id}/resolve", headers=auth_headers("anyone"))
    assert resolved.status_code == status.HTTP_200_OK
    assert resolved.json() == {
        "upheld": True,
        "votes_for": 2,
        "votes_against": 1,
        "total_votes": 3,
    }

    again = client.post(f"/api/v1/reports/{report_id}/resolve", headers=auth_headers("anyone"))
    assert again.status_code == status.HTTP_409_CONFLICT

    assert client.get(f"/api/v1/posts/{post_id}").json()["status"] == "removed"
    assert client.get(f"/api/v1/reputation/{REPORTER}").json()["score"] == 105
    assert client.get(f"/api/v1/reputation/{AUTHOR}").json()["score"] == 90

    votes = client.get(f"/api/v1/reports/{report_id}/votes").json()
    assert [vote["voter"] for vote in votes] == ["mod-a", "mod-b", "mod-c"]

    stats = client.get("/api/v1/system/stats").json()
    assert stats["height"] == test_settings.voting_period
    assert stats["reports"] == 1
    assert stats["total_staked"] == 3 * stake
    assert stats["escrow_balance"] == 3 * stake - test_settings.reporter_bonus


def test_resolve_without_votes_conflict(client, auth_headers, report_id, clock, test_settings) -> None:
    clock.advance(test_settings.voting_period)
    response = client.post(f"/api/v1/reports/{report_id}/resolve", headers=auth_headers("anyone"))
    assert response.status_code == status.HTTP_409_CONFLICT


def test_votes_for_missing_report(client) -> None:
    response = client.get("/api/v1/reports/42/votes")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_public_config(client, test_settings) -> None:
    data = client.get("/api/v1/system/config").json()
    assert data["moderation"]["voting_period"] == test_settings.voting_period
    assert data["moderation"]["min_stake_amount"] == test_settings.min_stake_amount
    assert "secret_key" not in str(data)


def test_file_report_accepts_empty_reason(client, auth_headers, post_id, test_settings) -> None:
    response = client.post(
        "/api/v1/reports/",
        json={"post_id": post_id, "reason": "", "stake": test_settings.min_stake_amount},
        headers=auth_headers(REPORTER),
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["reason"] == ""
