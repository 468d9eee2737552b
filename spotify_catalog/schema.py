from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from spotify_catalog.types import SavedKindType

# Spotify response sample for GET https://api.spotify.com/v1/me/tracks requests
# {
#   "href": "https://api.spotify.com/v1/me/tracks?offset=0&limit=20",
#   "limit": 20,
#   "next": "https://api.spotify.com/v1/me/tracks?offset=20&limit=20",
#   "offset": 0,
#   "previous": null,
#   "total": 4,
#   "items": [
#     {
#       "added_at": "2023-01-01T00:00:00Z",
#       "track": { ... }
#     }
#   ]
# }
#
# A "saved" item is keyed by its kind ("track", "album", "episode", ...).
# Internally it is held as {kind, added_at, item}; the keyed shape is only
# rebuilt when dumping.


ItemT = TypeVar("ItemT")

# Open mapping of service name to URL, e.g. {"spotify": "https://open.spotify.com/..."}
ExternalUrls = dict[str, str]


class CatalogModel(BaseModel):
    """Base for every catalog payload.

    Models are frozen snapshots of one response. Keys the API sends but that
    are not declared are kept, so dumping a model gives back the payload.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    def to_dict(self) -> dict[str, Any]:
        """Dump in the wire shape, leaving out keys the response never had."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class Image(CatalogModel):
    url: str = Field(..., min_length=1, description="Source URL of the image")
    height: int | None = Field(None, description="Image height in pixels, if known")
    width: int | None = Field(None, description="Image width in pixels, if known")

    model_config = ConfigDict(title="Image")


class Restriction(CatalogModel):
    reason: str = Field(
        ..., description="Reason for restriction: market, product, explicit, payment_required"
    )

    model_config = ConfigDict(title="Restriction")


class Followers(CatalogModel):
    href: str | None = Field(
        ..., description="(Currently deprecated) Endpoint for followers data, always null"
    )
    total: int = Field(..., description="Total number of followers")

    model_config = ConfigDict(title="Followers")


class Copyright(CatalogModel):
    text: str = Field(..., description="Copyright text")
    type: str = Field(..., description="C = copyright, P = sound recording copyright")

    model_config = ConfigDict(title="Copyright")


class ExternalIds(CatalogModel):
    isrc: str | None = Field(None, description="International Standard Recording Code")
    ean: str | None = Field(None, description="International Article Number")
    upc: str | None = Field(None, description="Universal Product Code")

    model_config = ConfigDict(title="ExternalIds")


class ResumePoint(CatalogModel):
    fully_played: bool = Field(..., description="Whether the item has been fully played")
    resume_position_ms: int = Field(..., description="Most recent position in milliseconds")

    model_config = ConfigDict(title="ResumePoint")


class LinkedFrom(CatalogModel):
    external_urls: ExternalUrls | None = Field(
        None, description="External URLs for the original track if available"
    )
    href: str | None = Field(None, description="API endpoint for the original track")
    id: str | None = Field(None, description="Original track ID this track is linked from")
    type: str | None = Field(None, description="Object type, should be 'track'")
    uri: str | None = Field(None, description="Spotify URI of the original track")

    model_config = ConfigDict(title="LinkedFrom")


class CollectionReference(CatalogModel):
    href: str = Field(..., description="API endpoint where the full collection can be fetched")
    total: int = Field(..., description="Total number of items in the collection")

    model_config = ConfigDict(title="CollectionReference")


class Paging(CollectionReference, Generic[ItemT]):
    """One offset-based page of ``ItemT``, in the order the server sent it."""

    items: list[ItemT] = Field(..., description="Items of this page")
    limit: int = Field(..., description="Maximum number of items returned per page")
    offset: int = Field(..., description="Index of the first item returned")
    next: str | None = Field(..., description="URL to the next page, or null on the last page")
    previous: str | None = Field(
        ..., description="URL to the previous page, or null on the first page"
    )

    model_config = ConfigDict(title="Paging")

    @property
    def is_first_page(self) -> bool:
        return self.previous is None

    @property
    def is_last_page(self) -> bool:
        return self.next is None

    def describe_window(self) -> str:
        return f"from {self.offset} to {self.offset + len(self.items)}"


class Saved(CatalogModel, Generic[ItemT]):
    """An item the user saved, and when.

    On the wire the item sits under a key named after its kind, e.g.
    ``{"added_at": ..., "track": {...}}``. Subclasses pin ``kind`` to a literal.
    """

    kind: SavedKindType = Field(..., description="Kind of the saved item")
    added_at: str = Field(..., description="Timestamp when the item was saved (ISO 8601)")
    item: ItemT = Field(..., description="The saved item")

    model_config = ConfigDict(title="Saved")

    @model_validator(mode="before")
    @classmethod
    def _unwrap_item(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "item" in data:
            return data
        kind = data.get("kind", cls.model_fields["kind"].default)
        if not isinstance(kind, str) or kind not in data:
            return data
        unwrapped = {key: value for key, value in data.items() if key != kind}
        unwrapped["kind"] = kind
        unwrapped["item"] = data[kind]
        return unwrapped

    @model_serializer(mode="wrap")
    def _wrap_item(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        data.pop("kind", None)
        if "item" in data:
            data[self.kind] = data.pop("item")
        return data
