import json

import requests

from portfolio_client import PortfolioAPI


def make_response(status_code, payload=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    response.url = "http://testserver"
    return response


class StubSession:
    """Records requests and answers them from a queue of responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def test_list_assets_sends_type_filter():
    session = StubSession(make_response(200, [{"ticker": "XPML11"}]))
    client = PortfolioAPI(base_url="http://localhost:8080/", session=session)

    assets, error = client.list_assets("Fundos Imobiliários")

    assert error is None
    assert assets == [{"ticker": "XPML11"}]
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://localhost:8080/api/assets"
    assert call["params"] == {"type": "Fundos Imobiliários"}


def test_null_list_becomes_empty():
    session = StubSession(make_response(200, None, text="null"))
    client = PortfolioAPI(base_url="http://localhost:8080", session=session)

    goals, error = client.list_goals(1)
    assert goals == []
    assert error is None


def test_update_asset_puts_to_keyed_path():
    asset = {"ticker": "ITUB4", "price": 32.0}
    session = StubSession(make_response(200, asset))
    client = PortfolioAPI(base_url="http://localhost:8081", session=session)

    data, error = client.update_asset("ITUB4", asset)

    assert data == asset
    assert error is None
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == "http://localhost:8081/api/assets/ITUB4"
    assert session.calls[0]["json"] == asset


def test_http_error_uses_message_field():
    session = StubSession(make_response(404, {"message": "No contribution found for user 3"}))
    client = PortfolioAPI(base_url="http://localhost:8080", session=session)

    data, error = client.get_latest_contribution(3)

    assert data is None
    assert error == {"status_code": 404, "message": "No contribution found for user 3"}


def test_http_error_without_json_uses_text():
    session = StubSession(make_response(500, text="Internal Server Error"))
    client = PortfolioAPI(base_url="http://localhost:8080", session=session)

    data, error = client.get_suggestions(1000)

    assert data == []
    assert error["status_code"] == 500
    assert error["message"] == "Internal Server Error"


def test_connection_error_is_reported():
    session = StubSession(requests.ConnectionError("connection refused"))
    client = PortfolioAPI(base_url="http://localhost:8080", session=session)

    data, error = client.get_portfolio()

    assert data is None
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_add_methods_post_payload():
    contribution = {"userID": 1, "amount": 100.0, "date": "2024-06-01"}
    session = StubSession(make_response(201, contribution))
    client = PortfolioAPI(base_url="http://localhost:8080", session=session)

    data, error = client.add_contribution(contribution)

    assert data == contribution
    assert error is None
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["url"] == "http://localhost:8080/api/contributions"


def test_http_error_with_non_object_json_body():
    session = StubSession(make_response(400, ["bad request", "amount"]))
    client = PortfolioAPI(base_url="http://localhost:8080", session=session)

    data, error = client.get_suggestions(1)

    assert data == []
    assert error == {"status_code": 400, "message": "['bad request', 'amount']"}


def test_http_error_with_json_string_body():
    session = StubSession(make_response(502, "upstream down"))
    client = PortfolioAPI(base_url="http://localhost:8080", session=session)

    data, error = client.get_portfolio()

    assert data is None
    assert error == {"status_code": 502, "message": "upstream down"}
