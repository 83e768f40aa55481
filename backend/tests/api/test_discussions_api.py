"""Tests for discussion topic and comment API endpoints."""

import uuid
import pytest


@pytest.fixture
def topic(client):
    response = client.post("/atlas/discussion-topics", json={"title": "Is Shor NISQ ready?", "status": "OPEN"})
    assert response.status_code == 201
    return response.json()


def test_create_topic(topic):
    assert topic["status"] == "OPEN"
    assert topic["date"] is not None


def test_comment_thread_paging(client, topic):
    comments = f"/atlas/discussion-topics/{topic['id']}/discussion-comments"
    question = client.post(comments, json={"text": "Why not?"}).json()
    response = client.post(comments, json={"text": "Too many qubits.", "reply_to_id": question["id"]})
    assert response.status_code == 201
    assert response.json()["reply_to_id"] == question["id"]

    response = client.get(comments, params={"page": 0, "size": 1})
    assert response.status_code == 200
    data = response.json()
    assert len(data["items"]) == 1
    assert data["total"] == 2


def test_reply_to_foreign_topic(client, topic):
    other = client.post("/atlas/discussion-topics", json={"title": "Grover"}).json()
    foreign = client.post(
        f"/atlas/discussion-topics/{other['id']}/discussion-comments", json={"text": "quadratic"}
    ).json()

    response = client.post(
        f"/atlas/discussion-topics/{topic['id']}/discussion-comments",
        json={"text": "reply", "reply_to_id": foreign["id"]},
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"


def test_comments_of_unknown_topic(client):
    response = client.get(f"/atlas/discussion-topics/{uuid.uuid4()}/discussion-comments")
    assert response.status_code == 404


def test_close_and_delete_topic(client, topic):
    response = client.put(
        f"/atlas/discussion-topics/{topic['id']}", json={"title": topic["title"], "status": "CLOSED"}
    )
    assert response.status_code == 200
    assert response.json()["status"] == "CLOSED"

    response = client.delete(f"/atlas/discussion-topics/{topic['id']}")
    assert response.status_code == 204
    assert client.get(f"/atlas/discussion-topics/{topic['id']}").status_code == 404
