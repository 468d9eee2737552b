from collections.abc import Callable
from typing import Any

import pytest
from pydantic import ValidationError

from spotify_catalog.entities import SavedChapter, SavedTrack, SimplifiedTrack, Track
from spotify_catalog.schema import Followers, Image, Paging, Saved


def test_image_size_absent_or_null() -> None:
    absent = Image.model_validate({"url": "https://i.scdn.co/image/abc"})
    null = Image.model_validate(
        {"url": "https://i.scdn.co/image/abc", "height": None, "width": None}
    )

    assert absent.height is None and null.height is None
    assert absent.to_dict() == {"url": "https://i.scdn.co/image/abc"}
    assert null.to_dict() == {"url": "https://i.scdn.co/image/abc", "height": None, "width": None}


def test_image_requires_url() -> None:
    with pytest.raises(ValidationError):
        Image.model_validate({"url": "", "height": 64, "width": 64})


def test_followers_href_is_required_but_nullable() -> None:
    assert Followers.model_validate({"href": None, "total": 3}).href is None
    with pytest.raises(ValidationError):
        Followers.model_validate({"total": 3})


def test_paging_keeps_server_order(load_json: Callable[[str], Any]) -> None:
    names = ["Zebra", "Apple", "Mango"]
    items = []
    for name in names:
        track = load_json("track")
        track["name"] = name
        items.append(track)
    page = Paging[Track].model_validate(
        {
            "href": "https://api.spotify.com/v1/tracks?offset=10&limit=5",
            "items": items,
            "limit": 5,
            "offset": 10,
            "total": 13,
            "next": None,
            "previous": "https://api.spotify.com/v1/tracks?offset=5&limit=5",
        }
    )

    assert [track.name for track in page.items] == names
    assert page.is_last_page and not page.is_first_page
    assert page.describe_window() == "from 10 to 13"


def test_paging_rejects_bad_item(load_json: Callable[[str], Any]) -> None:
    track = load_json("track")
    del track["duration_ms"]
    with pytest.raises(ValidationError):
        Paging[SimplifiedTrack].model_validate(
            {
                "href": "https://api.spotify.com/v1/tracks",
                "items": [track],
                "limit": 1,
                "offset": 0,
                "total": 1,
                "next": None,
                "previous": None,
            }
        )


def test_paging_next_and_previous_are_required() -> None:
    with pytest.raises(ValidationError):
        Paging[Track].model_validate(
            {
                "href": "https://api.spotify.com/v1/tracks",
                "items": [],
                "limit": 20,
                "offset": 0,
                "total": 0,
            }
        )


@pytest.mark.parametrize(("offset", "limit"), [(0, 2), (2, 2), (4, 2), (0, 50)])
def test_saved_tracks_page_invariants(
    make_saved_tracks_page: Callable[[int, int, int], Any], offset: int, limit: int
) -> None:
    page = Paging[SavedTrack].model_validate(make_saved_tracks_page(offset, limit, 5))

    assert len(page.items) <= page.limit
    assert page.total == 5


def test_saved_unwraps_keyed_item(load_json: Callable[[str], Any]) -> None:
    payload = {"added_at": "2023-01-01T00:00:00Z", "track": load_json("track")}

    saved = SavedTrack.model_validate(payload)

    assert saved.kind == "track"
    assert saved.added_at == "2023-01-01T00:00:00Z"
    assert saved.item.name == "Don't Stop the Party"
    assert saved.to_dict() == payload


def test_saved_accepts_record_shape(load_json: Callable[[str], Any]) -> None:
    chapter = load_json("chapter")

    saved = SavedChapter(added_at="2024-02-02T10:00:00Z", item=chapter)

    assert saved.item.audiobook.name == "Twenty Thousand Leagues Under the Sea"
    assert saved.model_dump(by_alias=True, exclude_unset=True)["chapter"]["id"] == chapter["id"]
    assert "item" not in saved.to_dict()


def test_saved_rejects_wrong_kind(load_json: Callable[[str], Any]) -> None:
    with pytest.raises(ValidationError):
        SavedTrack.model_validate(
            {"added_at": "2023-01-01T00:00:00Z", "episode": load_json("episode")}
        )


def test_generic_saved_takes_kind_from_payload(load_json: Callable[[str], Any]) -> None:
    saved = Saved[Track].model_validate(
        {"kind": "track", "added_at": "2023-01-01T00:00:00Z", "track": load_json("track")}
    )

    assert isinstance(saved.item, Track)
    assert set(saved.to_dict()) == {"added_at", "track"}


def test_models_are_read_only(load_json: Callable[[str], Any]) -> None:
    track = Track.model_validate(load_json("track"))
    with pytest.raises(ValidationError):
        track.name = "Renamed"  # type: ignore[misc]
