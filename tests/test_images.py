"""Tests for Unsplash image lookup and storage."""
from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_image_service
from app.db.models import OxfordWord
from app.services.images import ImageNotFoundError, ImageService, UnsplashClient
from app.utils.exceptions import ImageServiceError


def photo(term: str) -> dict:
    return {"urls": {"small": f"https://img.example.com/{term}-small.jpg", "regular": "unused"}}


def unsplash_handler(known: dict[str, int], seen: list[httpx.Request] | None = None):
    """Answer searches with ``known[term]`` photos; unknown terms get none."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        term = request.url.params["query"]
        per_page = int(request.url.params["per_page"])
        count = min(known.get(term, 0), per_page)
        return httpx.Response(200, json={"results": [photo(term) for _ in range(count)]})

    return handler


def make_client(handler) -> UnsplashClient:
    return UnsplashClient(access_key="test-access", transport=httpx.MockTransport(handler))


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture()
def use_image_service(app, db_session):
    def install(handler) -> ImageService:
        service = ImageService(db_session, client=make_client(handler), delay_seconds=0, sleep=RecordingSleep())
        app.dependency_overrides[get_image_service] = lambda: service
        return service

    return install


def test_client_sends_search_parameters() -> None:
    seen: list[httpx.Request] = []
    client = make_client(unsplash_handler({"apple": 3}, seen))

    urls = client.search("apple", per_page=2)

    assert urls == ["https://img.example.com/apple-small.jpg"] * 2
    request = seen[0]
    assert request.url.path == "/search/photos"
    assert request.url.params["orientation"] == "squarish"
    assert request.headers["Authorization"] == "Client-ID test-access"
    assert request.headers["Accept-Version"] == "v1"


def test_client_falls_back_to_regular_url() -> None:
    client = make_client(
        lambda request: httpx.Response(
            200, json={"results": [{"urls": {"regular": "https://img.example.com/r.jpg"}}, {"urls": {}}]}
        )
    )

    assert client.search("apple") == ["https://img.example.com/r.jpg"]


def test_client_without_key() -> None:
    with pytest.raises(ImageServiceError):
        UnsplashClient(access_key=None).search("apple")


def test_client_reports_error_status() -> None:
    client = make_client(lambda request: httpx.Response(403, text="Rate Limit Exceeded"))

    with pytest.raises(ImageServiceError) as exc_info:
        client.search("apple")

    assert exc_info.value.details == {"status_code": 403}


def test_assign_image_updates_matching_terms(db_session, oxford_words) -> None:
    service = ImageService(db_session, client=make_client(unsplash_handler({"Dog": 1})))

    url, updated = service.assign_image("Dog")

    assert url == "https://img.example.com/Dog-small.jpg"
    assert updated == 1
    db_session.expire_all()
    dog = db_session.query(OxfordWord).filter_by(term="dog").one()
    assert dog.image_url == url


def test_assign_image_without_results(db_session, oxford_words) -> None:
    service = ImageService(db_session, client=make_client(unsplash_handler({})))

    with pytest.raises(ImageNotFoundError):
        service.assign_image("apple")


def test_load_missing_pauses_between_lookups_and_collects_failures(db_session, oxford_words) -> None:
    sleep = RecordingSleep()
    service = ImageService(
        db_session,
        client=make_client(unsplash_handler({"abandon": 1, "dog": 1})),
        delay_seconds=1.5,
        sleep=sleep,
    )

    result = service.load_missing(limit=10)

    # journey already has an image.
    assert result.requested == 3
    assert result.loaded == 2
    assert result.failed == ["apple"]
    assert sleep.delays == [1.5, 1.5]


def test_search_is_capped(use_image_service, client: TestClient) -> None:
    use_image_service(unsplash_handler({"dog": 30}))

    response = client.get("/api/oxford/image/search", params={"term": "dog", "per": 40})

    assert response.status_code == 200
    assert len(response.json()["urls"]) == 12


def test_search_requires_term(client: TestClient) -> None:
    response = client.get("/api/oxford/image/search")

    assert response.status_code == 400


def test_assign_endpoint(use_image_service, client: TestClient, oxford_words) -> None:
    use_image_service(unsplash_handler({"apple": 1}))

    response = client.post("/api/oxford/image", json={"term": "apple"})

    assert response.status_code == 200
    assert response.json() == {
        "term": "apple",
        "imageUrl": "https://img.example.com/apple-small.jpg",
        "updated": 1,
    }
    words = client.get("/api/oxford", params={"search": "apple"}).json()["words"]
    assert words[0]["imageUrl"] == "https://img.example.com/apple-small.jpg"


def test_assign_endpoint_refreshes_cached_list(use_image_service, client: TestClient, oxford_words) -> None:
    assert client.get("/api/oxford", params={"search": "dog"}).json()["words"][0]["imageUrl"] is None
    use_image_service(unsplash_handler({"dog": 1}))

    client.post("/api/oxford/image", json={"term": "dog"})

    word = client.get("/api/oxford", params={"search": "dog"}).json()["words"][0]
    assert word["imageUrl"] == "https://img.example.com/dog-small.jpg"


def test_assign_endpoint_not_found(use_image_service, client: TestClient, oxford_words) -> None:
    use_image_service(unsplash_handler({}))

    response = client.post("/api/oxford/image", json={"term": "apple"})

    assert response.status_code == 404


def test_assign_endpoint_requires_term(client: TestClient) -> None:
    response = client.post("/api/oxford/image", json={})

    assert response.status_code == 400


def test_assign_endpoint_provider_failure(use_image_service, client: TestClient) -> None:
    use_image_service(lambda request: httpx.Response(500))

    response = client.post("/api/oxford/image", json={"term": "apple"})

    assert response.status_code == 500


def test_batch_requires_auth(client: TestClient) -> None:
    response = client.post("/api/oxford/image/batch")

    assert response.status_code == 401


def test_batch_loads_missing_images(use_image_service, client: TestClient, oxford_words, auth_headers) -> None:
    use_image_service(unsplash_handler({"abandon": 1, "apple": 1, "dog": 1}))

    response = client.post("/api/oxford/image/batch", json={"limit": 2}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"requested": 2, "loaded": 2, "failed": []}
