from __future__ import annotations

import json

import pytest
import requests

from music_library_client import MusicLibraryAPI


def _response(status_code: int, body, content_type: str = "application/json") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.headers["Content-Type"] = content_type
    response._content = body.encode("utf-8") if isinstance(body, str) else json.dumps(body).encode("utf-8")
    response.url = "http://test"
    return response


class FakeSession:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.response


def _client(session: FakeSession) -> MusicLibraryAPI:
    return MusicLibraryAPI(base_url="http://music.test/", session=session)


def test_add_song_posts_json_body():
    song = {"id": 1, "title": "Imagine", "artist": "John Lennon", "genre": "Rock", "play_count": 0}
    session = FakeSession(_response(201, song))

    data, error = _client(session).add_song("Imagine", "John Lennon", "Rock")

    assert error is None
    assert data == song
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://music.test/songs/new"
    assert call["json"] == {"title": "Imagine", "artist": "John Lennon", "genre": "Rock"}


def test_search_sends_only_non_empty_filters():
    session = FakeSession(_response(200, []))

    data, error = _client(session).search_songs(artist="beatles")

    assert (data, error) == ([], None)
    assert session.calls[0]["params"] == {"artist": "beatles"}


def test_play_song_reports_not_found():
    session = FakeSession(_response(404, {"detail": "Song not found"}))

    data, error = _client(session).play_song(42)

    assert data is None
    assert error == {"status_code": 404, "message": "Song not found"}
    assert session.calls[0]["url"] == "http://music.test/songs/play/42"


def test_visit_count_parses_plain_text():
    session = FakeSession(_response(200, "7", content_type="text/plain"))

    assert _client(session).visit_count() == (7, None)


def test_welcome_returns_message():
    session = FakeSession(_response(200, {"message": "hi"}))

    assert _client(session).welcome() == ("hi", None)


@pytest.mark.parametrize("method", ["visit_count", "welcome"])
def test_transport_errors_are_returned_not_raised(method):
    session = FakeSession(error=requests.ConnectionError("refused"))

    data, error = getattr(_client(session), method)()

    assert data is None
    assert error == {"status_code": None, "message": "refused"}


def test_search_failure_returns_empty_list():
    session = FakeSession(error=requests.Timeout("slow"))

    data, error = _client(session).search_songs(title="x")

    assert data == []
    assert error["message"] == "slow"
