"""Pytest configuration and fixtures."""

import threading
from typing import Any, Dict, List, Optional

import pytest
from fastapi import Body, FastAPI
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from property_catalog.store import PropertyStore

API_URL = "http://backend.test/properties"


class FakeBackend:
    """In-memory stand-in for the generic JSON ``/properties`` resource."""

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None):
        self.records: List[Dict[str, Any]] = list(records or [])
        self.fail_get = False
        self.fail_post = False
        self.get_calls = 0
        self.posted: List[Dict[str, Any]] = []
        # order of handled requests, e.g. ["GET", "POST", "GET"]
        self.calls: List[str] = []
        # when set, POST waits for the gate and signals post_entered first
        self.post_gate: Optional[threading.Event] = None
        self.post_entered = threading.Event()
        self.app = self._build()

    def _build(self) -> FastAPI:
        app = FastAPI()

        @app.get("/properties")
        def list_properties():
            self.get_calls += 1
            self.calls.append("GET")
            if self.fail_get:
                return JSONResponse(status_code=500, content={"error": "boom"})
            return self.records

        @app.post("/properties", status_code=201)
        def add_property(body: Dict[str, Any] = Body(...)):
            self.calls.append("POST")
            if self.post_gate is not None:
                self.post_entered.set()
                self.post_gate.wait(timeout=5)
            self.posted.append(body)
            if self.fail_post:
                return JSONResponse(status_code=500, content={"error": "boom"})
            numeric_ids = [r["id"] for r in self.records if isinstance(r.get("id"), int)]
            next_id = max(numeric_ids, default=0) + 1
            record = dict(body, id=next_id)
            self.records.append(record)
            return record

        return app

    def client(self) -> TestClient:
        return TestClient(self.app, base_url="http://backend.test")


def make_record(id: int, name: str, location: str, type: str, **extra) -> Dict[str, Any]:
    record = {
        "id": id,
        "name": name,
        "type": type,
        "location": location,
        "price": 250000,
        "description": f"{name} short",
        "fullDescription": f"{name} long",
        "sqft": 1800,
        "image": "https://example.com/img.jpg",
        "coordinates": {"lat": 30.2, "lng": -97.7},
    }
    record.update(extra)
    return record


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    return [
        make_record(1, "Oak Villa", "Austin", "House"),
        make_record(2, "Pine Plot", "Dallas", "Plot"),
    ]


@pytest.fixture
def backend(sample_records) -> FakeBackend:
    return FakeBackend(sample_records)


@pytest.fixture
def store(backend: FakeBackend) -> PropertyStore:
    """A store wired to the fake backend; not started."""
    return PropertyStore(base_url=API_URL, client=backend.client())
