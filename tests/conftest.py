# pylint: disable=redefined-outer-name
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from spotify_catalog.client import Client

TEST_DATA = Path(__file__).parent.joinpath("test_data")
API_URL = "https://api.spotify.test/v1"

Payload = dict[str, Any]


def _setup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock environment variables."""
    monkeypatch.setenv("SPOTIFY_API_URL", API_URL)
    monkeypatch.setenv("SPOTIFY_TIMEOUT", "5")


@pytest.fixture
def load_json() -> Callable[[str], Payload]:
    """Return a loader giving a fresh copy of a sample from tests/test_data."""

    def _load(name: str) -> Payload:
        with open(TEST_DATA.joinpath(f"{name}.json"), "r", encoding="utf-8") as file:
            data: Payload = json.load(file)
        return data

    return _load


@pytest.fixture
def user_payload() -> Payload:
    return {
        "display_name": "Jose Molina",
        "external_urls": {"spotify": "https://open.spotify.com/user/jpmolinamatute"},
        "href": "https://api.spotify.com/v1/users/jpmolinamatute",
        "id": "jpmolinamatute",
        "type": "user",
        "uri": "spotify:user:jpmolinamatute",
    }


@pytest.fixture
def playlist_payload(load_json: Callable[[str], Payload], user_payload: Payload) -> Payload:
    """A full playlist holding a track, an episode and a removed item, in that order."""
    tracks_href = "https://api.spotify.com/v1/playlists/3cEYpjA9oz9GiPac4AsH4n/tracks"
    return {
        "collaborative": False,
        "description": None,
        "external_urls": {"spotify": "https://open.spotify.com/playlist/3cEYpjA9oz9GiPac4AsH4n"},
        "followers": {"href": None, "total": 5},
        "href": "https://api.spotify.com/v1/playlists/3cEYpjA9oz9GiPac4AsH4n",
        "id": "3cEYpjA9oz9GiPac4AsH4n",
        "images": [],
        "name": "A Random randomness",
        "owner": user_payload,
        "public": None,
        "snapshot_id": "MTgsZWFmNmZiNTIzYTg4ODM0OGQzZWQzOGI4NTdkNTJlMjU0OWFkYTUxMA==",
        "tracks": {
            "href": f"{tracks_href}?offset=0&limit=100",
            "limit": 100,
            "next": None,
            "offset": 0,
            "previous": None,
            "total": 3,
            "items": [
                {
                    "added_at": "2023-01-01T00:00:00Z",
                    "added_by": user_payload,
                    "is_local": False,
                    "track": load_json("track"),
                },
                {
                    "added_at": "2023-01-02T00:00:00Z",
                    "added_by": user_payload,
                    "is_local": False,
                    "track": load_json("episode"),
                },
                {
                    "added_at": None,
                    "added_by": None,
                    "is_local": False,
                    "track": None,
                },
            ],
        },
        "type": "playlist",
        "uri": "spotify:playlist:3cEYpjA9oz9GiPac4AsH4n",
    }


@pytest.fixture
def local_file_entry(user_payload: Payload) -> Payload:
    """A playlist entry for a file the owner added from their own disk."""
    return {
        "added_at": "2023-02-14T09:30:00Z",
        "added_by": user_payload,
        "is_local": True,
        "primary_color": None,
        "track": {
            "album": {
                "album_type": None,
                "artists": [],
                "available_markets": [],
                "external_urls": {},
                "href": None,
                "id": None,
                "images": [],
                "name": "Demos",
                "release_date": None,
                "release_date_precision": None,
                "type": "album",
                "uri": None,
            },
            "artists": [
                {
                    "external_urls": {},
                    "href": None,
                    "id": None,
                    "name": "The Garage Band",
                    "type": "artist",
                    "uri": None,
                }
            ],
            "available_markets": [],
            "disc_number": 0,
            "duration_ms": 184000,
            "explicit": False,
            "external_ids": {},
            "external_urls": {},
            "href": None,
            "id": None,
            "is_local": True,
            "name": "First Take",
            "popularity": 0,
            "preview_url": None,
            "track_number": 0,
            "type": "track",
            "uri": "spotify:local:The+Garage+Band:Demos:First+Take:184",
        },
        "video_thumbnail": {"url": None},
    }


@pytest.fixture
def make_saved_tracks_page(
    load_json: Callable[[str], Payload],
) -> Callable[[int, int, int], Payload]:
    """Build one page of ``/me/tracks`` over a library of ``total`` saved tracks."""
    url = "https://api.spotify.com/v1/me/tracks"

    def _page(offset: int, limit: int, total: int) -> Payload:
        items = []
        for position in range(offset, min(offset + limit, total)):
            track = load_json("track")
            track["id"] = f"track{position}"
            track["uri"] = f"spotify:track:track{position}"
            items.append({"added_at": f"2023-01-{position + 1:02d}T00:00:00Z", "track": track})
        has_next = offset + limit < total
        return {
            "href": f"{url}?offset={offset}&limit={limit}",
            "limit": limit,
            "next": f"{url}?offset={offset + limit}&limit={limit}" if has_next else None,
            "offset": offset,
            "previous": f"{url}?offset={max(offset - limit, 0)}&limit={limit}" if offset else None,
            "total": total,
            "items": items,
        }

    return _page


@pytest.fixture
def diagnostic_sink() -> MagicMock:
    return MagicMock()


@pytest.fixture
def client_instance(monkeypatch: pytest.MonkeyPatch, diagnostic_sink: MagicMock) -> Client:
    """Return a real Client reading its settings from the mocked environment."""
    _setup_env(monkeypatch)
    return Client(on_error=diagnostic_sink)
