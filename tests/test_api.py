"""Tests for HTTP endpoints."""

import httpx
from fastapi.testclient import TestClient

from pantry_scanner.adapters.google_vision_client import HttpxGoogleVisionClient
from pantry_scanner.api.app import create_app
from pantry_scanner.domain.errors import ConfigurationError
from pantry_scanner.services.analysis import AnalysisService
from tests.conftest import (
    USER_TOKEN,
    FakeAuthProvider,
    FakeVisionClient,
    InMemoryPantryRepository,
    vision_payload,
)


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_image_returns_ranked_items(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/analyze-image", json={"image": "aW1hZ2U="})

    assert response.status_code == 200
    data = response.json()
    assert [item["name"] for item in data["items"]] == ["Banana", "Bread", "Milk"]
    milk = data["items"][2]
    assert milk == {
        "id": milk["id"],
        "name": "Milk",
        "confidence": 0.85,
        "category": "Dairy",
        "quantity": 1,
        "source": "text",
    }
    assert data["detectedText"] == "MILK 2% FAT"
    assert data["totalDetections"] == 3
    assert data["analysis"]["visionItems"] == 2
    assert data["analysis"]["confidenceThresholds"]["finalMinimum"] == 0.7


def test_analyze_image_returns_placeholder(
    container, vision_client: FakeVisionClient
) -> None:
    vision_client.payload = vision_payload(labels=[("Table", 0.99)], text="")
    client = TestClient(create_app(container))

    response = client.post("/analyze-image", json={"image": "aW1hZ2U="})

    assert response.status_code == 200
    items = response.json()["items"]
    assert items == [
        {
            "id": "no-items-detected",
            "name": "No food items detected",
            "confidence": 0,
            "category": "Info",
            "quantity": 0,
        }
    ]


def test_analyze_image_requires_image(
    container, vision_client: FakeVisionClient
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/analyze-image", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "No image data provided"}
    assert vision_client.calls == []


def test_analyze_image_rejects_malformed_body(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/analyze-image", json={"image": ["not", "a", "string"]})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request payload"


def test_analyze_image_reports_upstream_failure(
    container, vision_client: FakeVisionClient, upstream_failure
) -> None:
    vision_client.error = upstream_failure
    client = TestClient(create_app(container))

    response = client.post("/analyze-image", json={"image": "aW1hZ2U="})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to analyze image",
        "details": "Vision API error: Service Unavailable",
    }


def test_analyze_image_reports_missing_configuration(
    container, vision_client: FakeVisionClient
) -> None:
    vision_client.error = ConfigurationError(
        "Google Cloud Vision API key not configured"
    )
    client = TestClient(create_app(container))

    response = client.post("/analyze-image", json={"image": "aW1hZ2U="})

    assert response.status_code == 500
    assert response.json() == {"error": "Google Cloud Vision API key not configured"}


def test_analyze_image_reports_non_json_vision_body(container) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy error</html>")

    container.analysis_service = AnalysisService(
        client=HttpxGoogleVisionClient(
            api_key="vision-key",
            base_url="https://vision.test/v1",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
    )
    client = TestClient(create_app(container))

    response = client.post("/analyze-image", json={"image": "aW1hZ2U="})

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Failed to analyze image"
    assert data["details"].startswith("Vision API error: ")


def test_analyze_image_reports_per_image_vision_error(
    container, vision_client: FakeVisionClient
) -> None:
    vision_client.payload = {
        "responses": [{"error": {"code": 3, "message": "Bad image data."}}]
    }
    client = TestClient(create_app(container))

    response = client.post("/analyze-image", json={"image": "aW1hZ2U="})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to analyze image",
        "details": "Vision API error: Bad image data.",
    }


def test_save_pantry_items_for_signed_in_user(
    container,
    pantry_repository: InMemoryPantryRepository,
    auth_provider: FakeAuthProvider,
) -> None:
    client = TestClient(create_app(container))
    payload = {
        "items": [
            {"id": "1", "name": "Banana", "confidence": 0.95, "category": "Fruit"},
            {
                "id": "2",
                "name": "Milk",
                "confidence": 0.85,
                "category": "Dairy",
                "quantity": 2,
                "expiryDate": "2024-06-01",
            },
        ]
    }

    response = client.post(
        "/pantry-items",
        json=payload,
        headers={"Authorization": f"Bearer {USER_TOKEN}"},
    )

    assert response.status_code == 200
    assert response.json() == {"saved": 2}
    milk = pantry_repository.records[1]
    assert milk.user_id == auth_provider.user_id
    assert milk.quantity == 2
    assert milk.expiry_date == "2024-06-01"


def test_save_pantry_items_requires_auth(
    container, pantry_repository: InMemoryPantryRepository
) -> None:
    client = TestClient(create_app(container))
    payload = {"items": [{"id": "1", "name": "Banana", "confidence": 0.95}]}

    response = client.post(
        "/pantry-items", json=payload, headers={"Authorization": "Bearer wrong"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == "You must be signed in to save pantry items"
    assert pantry_repository.records == []


def test_save_pantry_items_rejects_placeholder(container) -> None:
    client = TestClient(create_app(container))
    payload = {
        "items": [
            {
                "id": "no-items-detected",
                "name": "No food items detected",
                "confidence": 0,
                "category": "Info",
                "quantity": 0,
            }
        ]
    }

    response = client.post(
        "/pantry-items",
        json=payload,
        headers={"Authorization": f"Bearer {USER_TOKEN}"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "No valid items to save"}


def test_list_pantry_items(container) -> None:
    client = TestClient(create_app(container))
    headers = {"Authorization": f"Bearer {USER_TOKEN}"}
    client.post(
        "/pantry-items",
        json={"items": [{"id": "1", "name": "Rice", "confidence": 0.85}]},
        headers=headers,
    )

    response = client.get("/pantry-items", headers=headers)

    assert response.status_code == 200
    items = response.json()["items"]
    assert [item["name"] for item in items] == ["Rice"]
    assert items[0]["category"] == "Other"


def test_list_pantry_items_requires_auth(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/pantry-items")

    assert response.status_code == 401
