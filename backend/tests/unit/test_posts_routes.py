"""
Blog post route tests against the in-memory repository.

Covers status codes, response shapes, validation and error mapping for
every /posts operation.
"""

import pytest
from bson import ObjectId
from fastapi import status

POST_KEYS = {"id", "title", "content", "author", "created"}


@pytest.fixture
def jane_doe_post():
    return {
        "author": {"firstName": "Jane", "lastName": "Doe"},
        "title": "Hello",
        "content": "World",
    }


@pytest.fixture
def existing_post(repository, jane_doe_post):
    return repository.add(jane_doe_post)


@pytest.fixture
def seeded_repository(repository, sequential_posts):
    for _ in range(3):
        repository.add(sequential_posts.generate())
    return repository


class TestListPosts:
    def test_empty_collection_returns_ok(self, client):
        response = client.get("/posts")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_returns_every_post_with_display_author(self, client, seeded_repository):
        response = client.get("/posts")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("application/json")
        body = response.json()
        assert len(body) == 3
        for post in body:
            assert set(post) == POST_KEYS
            stored = seeded_repository.posts[post["id"]]
            assert post["author"] == f"{stored.author.first_name} {stored.author.last_name}"
            assert post["title"] == stored.title
            assert post["content"] == stored.content


class TestCreatePost:
    def test_creates_post(self, client, repository, jane_doe_post):
        response = client.post("/posts", json=jane_doe_post)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert set(body) == POST_KEYS
        assert body["id"]
        assert "Jane" in body["author"]
        assert "Doe" in body["author"]
        assert body["title"] == "Hello"
        assert body["content"] == "World"

        stored = repository.posts[body["id"]]
        assert stored.author.first_name == "Jane"
        assert stored.author.last_name == "Doe"
        assert stored.created is not None

    def test_client_supplied_id_is_ignored(self, client, repository, jane_doe_post):
        supplied = str(ObjectId())
        response = client.post("/posts", json={**jane_doe_post, "id": supplied})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["id"] != supplied

    def test_keeps_supplied_created(self, client, repository, jane_doe_post):
        response = client.post(
            "/posts", json={**jane_doe_post, "created": "2020-01-02T03:04:05+00:00"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["created"].startswith("2020-01-02T03:04:05")

    def test_created_matches_later_lookup(self, client, jane_doe_post):
        created = client.post("/posts", json=jane_doe_post).json()

        fetched = client.get(f"/posts/{created['id']}").json()

        assert fetched == created

    def test_naive_created_is_returned_as_utc_milliseconds(self, client, jane_doe_post):
        response = client.post(
            "/posts", json={**jane_doe_post, "created": "2020-01-02T03:04:05.123456"}
        )

        created = response.json()["created"]
        assert created.startswith("2020-01-02T03:04:05.123")
        assert "123456" not in created
        assert created.endswith(("Z", "+00:00"))
        assert client.get(f"/posts/{response.json()['id']}").json()["created"] == created

    @pytest.mark.parametrize("missing", ["title", "content", "author"])
    def test_missing_field_is_rejected(self, client, repository, jane_doe_post, missing):
        del jane_doe_post[missing]

        response = client.post("/posts", json=jane_doe_post)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == f"Missing `{missing}` in request body"
        assert repository.posts == {}

    def test_missing_author_name_is_rejected(self, client, repository, jane_doe_post):
        del jane_doe_post["author"]["lastName"]

        response = client.post("/posts", json=jane_doe_post)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Missing `author.lastName` in request body"
        assert repository.posts == {}

    def test_blank_title_is_rejected(self, client, repository, jane_doe_post):
        jane_doe_post["title"] = "   "

        response = client.post("/posts", json=jane_doe_post)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "title" in response.json()["detail"]
        assert repository.posts == {}


class TestGetPost:
    def test_returns_post(self, client, existing_post):
        response = client.get(f"/posts/{existing_post.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == existing_post.id
        assert response.json()["author"] == "Jane Doe"

    @pytest.mark.parametrize("post_id", [str(ObjectId()), "not-an-object-id"])
    def test_unknown_id_is_not_found(self, client, post_id):
        response = client.get(f"/posts/{post_id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert post_id in response.json()["detail"]


class TestUpdatePost:
    def test_updates_title_and_content(self, client, repository, existing_post):
        update = {
            "id": existing_post.id,
            "title": "fofofofofofofof",
            "content": "futuristic fusion",
        }

        response = client.put(f"/posts/{existing_post.id}", json=update)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["title"] == "fofofofofofofof"
        stored = repository.posts[existing_post.id]
        assert stored.title == "fofofofofofofof"
        assert stored.content == "futuristic fusion"
        assert stored.author == existing_post.author
        assert stored.created == existing_post.created

    def test_body_id_is_optional(self, client, repository, existing_post):
        response = client.put(f"/posts/{existing_post.id}", json={"title": "Only title"})

        assert response.status_code == status.HTTP_201_CREATED
        assert repository.posts[existing_post.id].title == "Only title"
        assert repository.posts[existing_post.id].content == "World"

    def test_author_and_created_are_not_changed(self, client, repository, existing_post):
        response = client.put(
            f"/posts/{existing_post.id}",
            json={
                "id": existing_post.id,
                "author": {"firstName": "John", "lastName": "Smith"},
                "created": "1999-01-01T00:00:00+00:00",
                "title": "New title",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        stored = repository.posts[existing_post.id]
        assert stored.author.first_name == "Jane"
        assert stored.created == existing_post.created
        assert response.json()["author"] == "Jane Doe"

    def test_id_mismatch_is_rejected(self, client, repository, existing_post):
        response = client.put(
            f"/posts/{existing_post.id}",
            json={"id": str(ObjectId()), "title": "Hijack"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "must match" in response.json()["detail"]
        assert repository.posts[existing_post.id].title == "Hello"

    def test_unknown_id_is_not_found(self, client):
        post_id = str(ObjectId())

        response = client.put(f"/posts/{post_id}", json={"id": post_id, "title": "x"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_blank_content_is_rejected(self, client, repository, existing_post):
        response = client.put(f"/posts/{existing_post.id}", json={"content": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert repository.posts[existing_post.id].content == "World"


class TestDeletePost:
    def test_deletes_post(self, client, repository, existing_post):
        response = client.delete(f"/posts/{existing_post.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""
        assert existing_post.id not in repository.posts

    def test_delete_is_idempotent(self, client, repository, existing_post):
        first = client.delete(f"/posts/{existing_post.id}")
        second = client.delete(f"/posts/{existing_post.id}")

        assert first.status_code == status.HTTP_204_NO_CONTENT
        assert second.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/posts/{existing_post.id}").status_code == status.HTTP_404_NOT_FOUND

    def test_malformed_id_is_treated_as_missing(self, client):
        response = client.delete("/posts/not-an-object-id")

        assert response.status_code == status.HTTP_204_NO_CONTENT


class TestStoreFailures:
    @pytest.mark.parametrize(
        "method, path, body",
        [
            ("GET", "/posts", None),
            ("GET", f"/posts/{ObjectId()}", None),
            ("POST", "/posts", {"author": {"firstName": "A", "lastName": "B"}, "title": "t", "content": "c"}),
            ("PUT", f"/posts/{ObjectId()}", {"title": "t"}),
            ("DELETE", f"/posts/{ObjectId()}", None),
        ],
    )
    def test_store_errors_map_to_service_unavailable(self, broken_client, method, path, body):
        response = broken_client.request(method, path, json=body)

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert "unavailable" in response.json()["detail"]
        assert "27017" not in response.json()["detail"]


class TestRootEndpoints:
    def test_root_lists_entry_points(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["posts"] == "/posts"

    def test_health_reports_disconnected_store(self, client, monkeypatch):
        async def disconnected():
            return False

        monkeypatch.setattr("main.check_db_connection", disconnected)

        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["database"] == "disconnected"
        assert response.json()["status"] == "degraded"
