import json
from unittest.mock import Mock

import pytest
import requests

from recommendations_api.client import RecommendationsAPI


def _response(status_code, body=None):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = json.dumps(body).encode() if body is not None else b""
    resp.url = "http://testserver"
    return resp


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return RecommendationsAPI(base_url="http://testserver/", session=session)


def test_add_posts_body(api, session):
    created = {"id": 1, "name": "Song A", "media_link": "https://youtu.be/a", "score": 0}
    session.request.return_value = _response(201, created)

    data, error = api.add("Song A", "https://youtu.be/a")

    assert error is None
    assert data == created
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://testserver/api/v1/recommendations/"
    assert kwargs["json"] == {"name": "Song A", "media_link": "https://youtu.be/a"}
    assert "Authorization" not in kwargs["headers"]


def test_conflict_is_reported(api, session):
    session.request.return_value = _response(
        409, {"detail": {"type": "conflict", "message": "Recommendations names must be unique"}}
    )

    data, error = api.add("Song A", "https://youtu.be/a")

    assert data is None
    assert error == {"status_code": 409, "message": "Recommendations names must be unique"}


def test_not_found_with_empty_message(api, session):
    session.request.return_value = _response(404, {"detail": {"type": "not_found", "message": ""}})

    data, error = api.upvote(7)

    assert data is None
    assert error == {"status_code": 404, "message": "not_found"}
    assert session.request.call_args.kwargs["url"].endswith("/recommendations/7/upvote")


def test_downvote_reports_removal(api, session):
    session.request.return_value = _response(200, {"id": 3, "score": -6, "removed": True})

    data, error = api.downvote(3)

    assert error is None
    assert data["removed"] is True


def test_top_and_list_default_to_empty_on_error(api, session):
    session.request.return_value = _response(500, {"detail": "boom"})

    assert api.top(5) == ([], {"status_code": 500, "message": "boom"})
    assert api.list()[0] == []


def test_transport_error(api, session):
    session.request.side_effect = requests.ConnectionError("connection refused")

    data, error = api.random()

    assert data is None
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_api_key_header(session):
    session.request.return_value = _response(200, [])
    api = RecommendationsAPI(base_url="http://testserver", api_key="secret", session=session)

    api.list()

    assert session.request.call_args.kwargs["headers"] == {"Authorization": "Bearer secret"}


def test_non_json_success_body(api, session):
    resp = requests.Response()
    resp.status_code = 200
    resp._content = b"<html>maintenance</html>"
    resp.url = "http://testserver"
    session.request.return_value = resp

    data, error = api.random()

    assert data is None
    assert error["status_code"] == 200
    assert "Invalid JSON" in error["message"]
