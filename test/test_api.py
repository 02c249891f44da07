# test/test_api.py
import pytest

from fakes import make_response


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200, f"Unexpected status: {response.status_code}"
    assert response.json() == {"status": "ok"}


def test_crypto_asking_size_end_to_end(client, session):
    session.response = make_response({"quote": {"ap": 30000, "as": 1.5}})
    response = client.post("/cryptoaskingsize", json={"data": {"exchange": "FTX", "symbol": "BTCUSD"}})
    assert response.status_code == 200
    assert response.json() == {"jobRunId": 1, "askingSize": 1.5}
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://data.test/v1beta1/crypto/BTCUSD/quotes/latest"
    assert call["params"] == {"exchange": "FTX"}


def test_alpaca_trade_end_to_end(client, session):
    session.response = make_response({"status": "filled"}, status=200)
    response = client.post("/alpacatrade", json={"id": 42, "data": {"symbol": "AAPL", "qty": 1, "side": "buy"}})
    assert response.status_code == 200
    assert response.json() == {"jobRunId": 42, "orderStatus": "filled"}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://trading.test/v2/orders"
    assert call["json"] == {"symbol": "AAPL", "qty": 1, "side": "buy", "type": "market", "time_in_force": "day"}


def test_equities_price_unscaled(client, session):
    session.response = make_response({"quote": {"ap": 123.456, "as": 100}})
    response = client.post("/equitiesprice", json={"data": {"symbol": "AAPL"}})
    assert response.status_code == 200
    assert response.json() == {"jobRunId": 1, "price": 123.456}
    assert session.calls[0]["url"] == "https://data.test/v2/stocks/AAPL/quotes/latest"


def test_crypto_price_in_cents(client, session):
    session.response = make_response({"quote": {"ap": 123.456, "as": 1}})
    response = client.post("/cryptoprice", json={"id": 11, "data": {"exchange": "CBSE", "symbol": "ETHUSD"}})
    assert response.status_code == 200
    assert response.json() == {"jobRunId": 11, "price": 12345}


def test_equities_price_missing_symbol(client, session):
    response = client.post("/equitiesprice", json={"data": {}})
    assert response.status_code == 500
    assert response.json() == {
        "jobRunId": 1,
        "status": "errored",
        "error": "AdapterError",
        "message": "Symbol is required",
        "statusCode": 500,
    }


@pytest.mark.parametrize("path", ["/equitiesprice", "/cryptoprice", "/cryptoaskingsize", "/alpacatrade"])
def test_error_envelope_echoes_id(client, path):
    response = client.post(path, json={"id": 77, "data": {}})
    assert response.status_code == 500
    assert response.json()["jobRunId"] == 77


@pytest.mark.parametrize("path", ["/equitiesprice", "/cryptoprice", "/cryptoaskingsize", "/alpacatrade"])
def test_malformed_upstream_json(client, session, path):
    session.response = make_response(raw=b"not json")
    data = {"symbol": "BTCUSD", "exchange": "FTX", "qty": 1, "side": "buy"}
    response = client.post(path, json={"id": 2, "data": data})
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "AdapterError"
    assert body["statusCode"] == 500
    assert body["jobRunId"] == 2


def test_upstream_status_passes_through(client, session):
    session.response = make_response({"quote": {"ap": 1.0, "as": 1}}, status=203)
    response = client.post("/equitiesprice", json={"data": {"symbol": "AAPL"}})
    assert response.status_code == 203


def test_empty_body_defaults(client):
    response = client.post("/cryptoprice")
    assert response.status_code == 500
    assert response.json()["message"] == "Exchange is required"
    assert response.json()["jobRunId"] == 1


@pytest.mark.parametrize("content", [b"{not json", b"[1, 2]"])
def test_non_object_body_gets_envelope(client, content):
    response = client.post("/equitiesprice", content=content, headers={"content-type": "application/json"})
    assert response.status_code == 500
    assert response.json() == {
        "jobRunId": 1,
        "status": "errored",
        "error": "AdapterError",
        "message": "Request body must be a JSON object",
        "statusCode": 500,
    }


def test_float_id_is_echoed_on_trade(client, session):
    session.response = make_response({"status": "filled"})
    response = client.post("/alpacatrade", json={"id": 42.0, "data": {"symbol": "AAPL", "qty": 1, "side": "buy"}})
    assert response.status_code == 200
    assert response.json() == {"jobRunId": 42.0, "orderStatus": "filled"}


def test_blank_symbol_never_reaches_upstream(client, session):
    response = client.post("/equitiesprice", json={"data": {"symbol": "  "}})
    assert response.status_code == 500
    assert response.json()["message"] == "Symbol is required"
    assert session.calls == []
