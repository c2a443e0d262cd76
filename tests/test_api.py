from typing import Optional

from fastapi import FastAPI, Query
from fastapi.testclient import TestClient

from measured.core.monitor import measured_async_function, measured_function

app = FastAPI()


@app.get("/items/{item_id}")
@measured_async_function
async def read_item(item_id: int, q: Optional[str] = None):
    return {"item_id": item_id, "q": q}


@app.get("/health")
@measured_function("health_check")
def health(verbose: bool = Query(False)):
    return {"status": "ok", "verbose": verbose}


client = TestClient(app)


def test_async_route_keeps_parameters(recorder):
    res = client.get("/items/5", params={"q": "policy"})

    assert res.status_code == 200
    assert res.json() == {"item_id": 5, "q": "policy"}
    assert recorder.count("read_item") == 1


def test_sync_route_keeps_parameters(recorder):
    res = client.get("/health", params={"verbose": "true"})

    assert res.status_code == 200
    assert res.json() == {"status": "ok", "verbose": True}
    assert recorder.count("health_check") == 1


def test_validation_errors_are_unchanged(recorder):
    res = client.get("/items/not-a-number")

    assert res.status_code == 422
    # Request never reached the handler
    assert recorder.count("read_item") == 0
