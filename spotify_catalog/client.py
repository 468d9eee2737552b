import logging
from collections.abc import Callable
from typing import Generic, TypeVar
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from spotify_catalog.entities import (
    Album,
    Artist,
    Audiobook,
    AudioFeatures,
    Category,
    Chapter,
    Episode,
    FeaturedPlaylists,
    Playlist,
    PlaylistTrack,
    PrivateUser,
    PublicUser,
    SavedAlbum,
    SavedEpisode,
    SavedTrack,
    Show,
    Track,
)
from spotify_catalog.errors import (
    CatalogError,
    PayloadError,
    ShapeError,
    StatusError,
    TransportError,
)
from spotify_catalog.schema import Paging
from spotify_catalog.settings import Settings

ModelT = TypeVar("ModelT", bound=BaseModel)
QueryValue = str | int | None
DiagnosticSink = Callable[[CatalogError], None]


class FetchResult(BaseModel, Generic[ModelT]):
    """Outcome of one fetch: a parsed value, or the error that was reported."""

    value: ModelT | None = None
    error: CatalogError | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None


def _segment(identifier: str) -> str:
    return quote(identifier, safe="")


class Client:
    """Read-only access to Spotify catalog resources.

    Every ``get_*`` coroutine performs exactly one GET and returns the parsed
    model, or ``None`` when anything goes wrong. Failures never propagate; each
    one is handed to ``on_error`` (logged by default) exactly once.

    When ``http_client`` is given it is used as-is and never closed, so the
    caller owns its timeouts and lifecycle. Otherwise each call opens
    its own short-lived ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
        on_error: DiagnosticSink | None = None,
    ) -> None:
        self.logger = logging.getLogger(__name__)
        self.settings = settings if settings is not None else Settings.from_env()
        self.http_client = http_client
        self.on_error: DiagnosticSink = on_error or self._log_failure
        self.logger.debug(
            "Initialized Client: api_url=%s shared_http_client=%s",
            self.settings.api_url,
            http_client is not None,
        )

    def _log_failure(self, error: CatalogError) -> None:
        self.logger.error("Error fetching %s: %s", error.url, error)

    def _get_headers(self, token: str) -> dict[str, str]:
        self.logger.debug("Generating request headers: token_length=%d", len(token or ""))
        return {"Authorization": f"Bearer {token}"}

    def build_url(self, path: str, **query: QueryValue) -> str:
        url = f"{self.settings.api_url}/{path}"
        params = {key: value for key, value in query.items() if value is not None}
        if params:
            url = f"{url}?{urlencode(params, safe=',')}"
        return url

    async def _send(self, url: str, headers: dict[str, str]) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.get(url, headers=headers)
        async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
            return await client.get(url, headers=headers)

    async def _fetch_model(self, token: str, url: str, model: type[ModelT]) -> ModelT:
        try:
            response = await self._send(url, self._get_headers(token))
        # Header values are encoded as ASCII while the request is built.
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            raise TransportError(f"Request failed: {exc!r}", url) from exc

        if not 200 <= response.status_code < 300:
            raise StatusError(
                f"Unexpected status code {response.status_code}", url, response.status_code
            )

        try:
            response_data = response.json()
        except ValueError as exc:
            raise PayloadError(f"Response body is not valid JSON: {exc}", url) from exc

        try:
            result = model.model_validate(response_data)
        except ValidationError as exc:
            raise ShapeError(
                f"Response does not match {model.__name__}: {exc.error_count()} errors", url
            ) from exc
        self.logger.debug("Parsed %s from %s", model.__name__, url)
        return result

    async def fetch(
        self, token: str, path: str, model: type[ModelT], **query: QueryValue
    ) -> FetchResult[ModelT]:
        """GET ``path`` and parse it as ``model``, reporting any failure to ``on_error``."""
        url = self.build_url(path, **query)
        self.logger.debug("Fetching %s: url=%s", model.__name__, url)
        try:
            value = await self._fetch_model(token, url, model)
        except CatalogError as error:
            self.on_error(error)
            failed: FetchResult[ModelT] = FetchResult(error=error)
            return failed
        return FetchResult(value=value)

    async def _get(
        self, token: str, path: str, model: type[ModelT], **query: QueryValue
    ) -> ModelT | None:
        result = await self.fetch(token, path, model, **query)
        return result.value

    async def get_category(
        self,
        token: str,
        category_id: str,
        fields: str | None = None,
        locale: str | None = None,
    ) -> Category | None:
        path = f"browse/categories/{_segment(category_id)}"
        return await self._get(token, path, Category, fields=fields, locale=locale)

    async def get_track(
        self, token: str, track_id: str, market: str | None = None
    ) -> Track | None:
        return await self._get(token, f"tracks/{_segment(track_id)}", Track, market=market)

    async def get_track_audio_features(self, token: str, track_id: str) -> AudioFeatures | None:
        return await self._get(token, f"audio-features/{_segment(track_id)}", AudioFeatures)

    async def get_album(
        self, token: str, album_id: str, market: str | None = None
    ) -> Album | None:
        return await self._get(token, f"albums/{_segment(album_id)}", Album, market=market)

    async def get_artist(self, token: str, artist_id: str) -> Artist | None:
        return await self._get(token, f"artists/{_segment(artist_id)}", Artist)

    async def get_playlist(
        self, token: str, playlist_id: str, market: str | None = None
    ) -> Playlist | None:
        path = f"playlists/{_segment(playlist_id)}"
        return await self._get(token, path, Playlist, market=market)

    async def get_playlist_tracks(
        self,
        token: str,
        playlist_id: str,
        market: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paging[PlaylistTrack] | None:
        path = f"playlists/{_segment(playlist_id)}/tracks"
        return await self._get(
            token, path, Paging[PlaylistTrack], market=market, limit=limit, offset=offset
        )

    async def get_featured_playlists(
        self,
        token: str,
        locale: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> FeaturedPlaylists | None:
        return await self._get(
            token,
            "browse/featured-playlists",
            FeaturedPlaylists,
            locale=locale,
            limit=limit,
            offset=offset,
        )

    async def get_chapter(
        self, token: str, chapter_id: str, market: str | None = None
    ) -> Chapter | None:
        return await self._get(token, f"chapters/{_segment(chapter_id)}", Chapter, market=market)

    async def get_audiobook(
        self, token: str, audiobook_id: str, market: str | None = None
    ) -> Audiobook | None:
        path = f"audiobooks/{_segment(audiobook_id)}"
        return await self._get(token, path, Audiobook, market=market)

    async def get_episode(
        self, token: str, episode_id: str, market: str | None = None
    ) -> Episode | None:
        return await self._get(token, f"episodes/{_segment(episode_id)}", Episode, market=market)

    async def get_show(self, token: str, show_id: str, market: str | None = None) -> Show | None:
        return await self._get(token, f"shows/{_segment(show_id)}", Show, market=market)

    async def get_user(self, token: str, user_id: str) -> PublicUser | None:
        return await self._get(token, f"users/{_segment(user_id)}", PublicUser)

    async def get_current_user(self, token: str) -> PrivateUser | None:
        return await self._get(token, "me", PrivateUser)

    async def get_saved_tracks(
        self,
        token: str,
        market: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paging[SavedTrack] | None:
        return await self._get(
            token, "me/tracks", Paging[SavedTrack], market=market, limit=limit, offset=offset
        )

    async def get_saved_albums(
        self,
        token: str,
        market: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paging[SavedAlbum] | None:
        return await self._get(
            token, "me/albums", Paging[SavedAlbum], market=market, limit=limit, offset=offset
        )

    async def get_saved_episodes(
        self,
        token: str,
        market: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paging[SavedEpisode] | None:
        return await self._get(
            token, "me/episodes", Paging[SavedEpisode], market=market, limit=limit, offset=offset
        )
