import pytest
import requests

from infrastructure.api import ApiError, VideoApiClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK", invalid_json=False):
        self.status_code = status_code
        self._payload = payload
        self.reason = reason
        self._invalid_json = invalid_json

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._invalid_json:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


def make_client(**kwargs):
    session = FakeSession(**kwargs)
    return VideoApiClient("http://127.0.0.1:8000/", session=session), session


def test_list_videos_skips_malformed_records():
    client, session = make_client(response=FakeResponse(payload=[
        {"id": 1, "title": "A", "file": "/media/a.mp4", "duration_seconds": 12.5},
        {"title": "no id"},
    ]))
    videos = client.list_videos()
    assert [v.id for v in videos] == [1]
    assert session.calls[0][:2] == ("GET", "http://127.0.0.1:8000/api/videos/")


def test_search_sends_query_parameters_and_returns_results():
    client, session = make_client(response=FakeResponse(payload={
        "query": "features",
        "results": [{"start": 1, "end": 2, "text": "t", "score": 0.5}, "junk"],
    }))
    hits = client.search(7, "features", include_frame=False, top_k=3)
    method, url, kwargs = session.calls[0]
    assert url == "http://127.0.0.1:8000/api/videos/7/search"
    assert kwargs["params"] == {"query": "features", "include_frame": "0", "top_k": "3"}
    assert hits == [{"start": 1, "end": 2, "text": "t", "score": 0.5}]


def test_error_detail_is_surfaced():
    client, _ = make_client(response=FakeResponse(400, {"detail": "Transcript already exists"}, "Bad Request"))
    with pytest.raises(ApiError, match="already") as exc:
        client.transcribe(3)
    assert exc.value.status_code == 400


def test_error_without_detail_uses_status_line():
    client, _ = make_client(response=FakeResponse(500, reason="Internal Server Error", invalid_json=True))
    with pytest.raises(ApiError, match="Failed to delete video: 500 Internal Server Error"):
        client.delete_video(3)


def test_transport_errors_become_api_errors():
    client, _ = make_client(error=requests.exceptions.ConnectionError("refused"))
    with pytest.raises(ApiError, match="Failed to list videos"):
        client.list_videos()


def test_to_absolute_media():
    client, _ = make_client()
    assert client.to_absolute_media("/media/a.mp4") == "http://127.0.0.1:8000/media/a.mp4"
    assert client.to_absolute_media("https://cdn/a.mp4") == "https://cdn/a.mp4"


@pytest.mark.parametrize("call", [
    lambda client: client.list_videos(),
    lambda client: client.search(3, "intro"),
])
def test_non_json_success_body_becomes_api_error(call):
    client, _ = make_client(response=FakeResponse(status_code=200, invalid_json=True))
    with pytest.raises(ApiError, match="invalid JSON") as exc:
        call(client)
    assert exc.value.status_code == 200
