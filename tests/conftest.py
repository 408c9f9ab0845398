"""
Pytest configuration and shared fixtures for roadie_client tests.

This file provides common test fixtures used across the unit tests:
- Mock transports that record outgoing requests
- Sample request models
- Sample API payloads
"""

import datetime

import httpx
import pytest

from roadie_client.models import (
    Address,
    Contact,
    CreateEstimateRequest,
    Item,
    Location,
    TimeWindow,
)


# =============================================================================
# Transport Fixtures
# =============================================================================

@pytest.fixture
def sent_requests():
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def respond_with(sent_requests):
    """
    Factory for an httpx.MockTransport answering every request the same way.

    Pass `json_body` for a JSON response or `content` for raw bytes.
    """
    def _factory(status_code=200, json_body=None, content=None):
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            if json_body is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=json_body)

        return httpx.MockTransport(handler)
    return _factory


# =============================================================================
# Model Fixtures
# =============================================================================

@pytest.fixture
def pickup_location():
    return Location(
        address=Address(
            name="Warehouse 7",
            store_number="0007",
            street1="123 Main St",
            city="Atlanta",
            state="GA",
            zip_="30303",
            latitude=33.749,
            longitude=-84.388,
        ),
        contact=Contact(name="Dock Manager", phone="4045550100"),
        notes="Use the loading dock in the back",
    )


@pytest.fixture
def delivery_location():
    return Location(
        address=Address(
            street1="500 Peachtree St",
            street2="Apt 12",
            city="Atlanta",
            state="GA",
            zip_="30308",
        ),
        contact=Contact(name="Jane Doe", phone="4045550199"),
    )


@pytest.fixture
def sample_items():
    return [
        Item(
            length=12.0,
            width=8.5,
            height=4.0,
            weight=3.2,
            quantity=2,
            value=49.99,
            description="Running shoes",
            reference_id="SKU-123",
        )
    ]


@pytest.fixture
def sample_estimate_request(sample_items, pickup_location, delivery_location):
    """Estimate request with every optional section filled in."""
    start = datetime.datetime(2026, 10, 20, 14, 0, tzinfo=datetime.timezone.utc)
    return CreateEstimateRequest(
        items=sample_items,
        pickup_location=pickup_location,
        delivery_location=delivery_location,
        pickup_after=start,
        deliver_between=TimeWindow(start=start, end=start + datetime.timedelta(hours=4)),
    )


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def estimate_payload():
    return {"price": 23.5, "size": "medium", "estimated_distance": 8.4}


@pytest.fixture
def validation_error_payload():
    return {
        "errors": [
            {
                "code": "invalid_zip",
                "parameter": "delivery_location.address.zip",
                "message": "Zip code is not serviceable",
            }
        ]
    }


@pytest.fixture
def shipment_payload():
    return {
        "id": 4567,
        "reference_id": "ORDER-991",
        "description": "Running shoes",
        "state": "assigned",
        "items": [
            {
                "length": 12.0,
                "width": 8.5,
                "height": 4.0,
                "weight": 3.2,
                "quantity": 2,
                "value": 49.99,
            }
        ],
        "pickup_location": {
            "address": {"street1": "123 Main St", "city": "Atlanta", "state": "GA", "zip": "30303"},
            "contact": {"name": "Dock Manager", "phone": "4045550100"},
        },
        "delivery_location": {
            "address": {"street1": "500 Peachtree St", "city": "Atlanta", "state": "GA", "zip": "30308"},
            "contact": {"name": "Jane Doe", "phone": "4045550199"},
        },
        "pickup_after": "2026-10-20T14:00:00Z",
        "deliver_between": {"start": "2026-10-20T14:00:00Z", "end": "2026-10-20T18:00:00Z"},
        "options": {"signature_required": True, "over_21_required": False},
        "tracking_number": "RD-4567",
        "driver": {"name": "Sam Driver", "phone": "4045550123"},
        "events": [
            {
                "name": "driver_assigned",
                "occurred_at": "2026-10-20T14:05:00Z",
                "location": {
                    "address": {"street1": "123 Main St", "city": "Atlanta", "state": "GA", "zip": "30303"}
                },
            }
        ],
        "price": 23.5,
        "estimated_distance": 8.4,
        "created_at": "2026-10-20T13:00:00Z",
        "updated_at": "2026-10-20T14:05:00Z",
    }


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Pytest configuration hook."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
