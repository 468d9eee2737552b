from typing import Annotated, Literal

from pydantic import ConfigDict, Field

from spotify_catalog.schema import (
    CatalogModel,
    CollectionReference,
    Copyright,
    ExternalIds,
    ExternalUrls,
    Followers,
    Image,
    LinkedFrom,
    Paging,
    Restriction,
    ResumePoint,
    Saved,
)
from spotify_catalog.types import AlbumType, DatePrecisionType

# Convention used below:
#   field: T | None = Field(..., ...)   key always present, value may be null
#   field: T | None = Field(None, ...)  key may be left out of the response


class Category(CatalogModel):
    href: str | None = Field(None, description="Spotify Web API endpoint for this category")
    icons: list[Image] | None = Field(None, description="Category icons in various sizes")
    id: str = Field(..., description="Spotify category ID")
    name: str = Field(..., description="Name of the category")

    model_config = ConfigDict(title="Category")


class AudioFeatures(CatalogModel):
    acousticness: float = Field(..., description="Confidence (0.0-1.0) the track is acoustic")
    analysis_url: str = Field(..., description="URL to the full audio analysis of the track")
    danceability: float = Field(..., description="How suitable the track is for dancing")
    duration_ms: int = Field(..., description="Track length in milliseconds")
    energy: float = Field(..., description="Perceptual measure of intensity and activity")
    id: str = Field(..., description="Spotify ID of the track")
    instrumentalness: float = Field(..., description="Likelihood the track has no vocals")
    key: int = Field(..., description="Pitch class of the key, -1 if no key was detected")
    liveness: float = Field(..., description="Likelihood the track was performed live")
    loudness: float = Field(..., description="Overall loudness in decibels")
    mode: int = Field(..., description="Modality: 1 for major, 0 for minor")
    speechiness: float = Field(..., description="Presence of spoken words in the track")
    tempo: float = Field(..., description="Estimated tempo in beats per minute")
    time_signature: int = Field(..., description="Estimated time signature, from 3 to 7")
    track_href: str = Field(..., description="Spotify Web API endpoint for the track")
    type: Literal["audio_features"] = Field(..., description="Object type")
    uri: str = Field(..., description="Spotify URI for the track")
    valence: float = Field(..., description="Musical positiveness conveyed by the track")

    model_config = ConfigDict(title="AudioFeatures")


class PublicUser(CatalogModel):
    display_name: str | None = Field(..., description="User's display name, null if not available")
    external_urls: ExternalUrls = Field(..., description="External URLs for this user")
    followers: Followers | None = Field(None, description="Follower count data if available")
    href: str = Field(..., description="Spotify Web API endpoint for this user")
    id: str = Field(..., description="User's Spotify ID")
    images: list[Image] | None = Field(None, description="User's profile image")
    type: Literal["user"] = Field(..., description="Object type, always 'user'")
    uri: str = Field(..., description="Spotify URI for the user")

    model_config = ConfigDict(title="PublicUser")


class PrivateUser(PublicUser):
    """The user the access token belongs to (``/me``)."""

    country: str | None = Field(None, description="ISO 3166-1 alpha-2 country code")
    email: str | None = Field(None, description="User's email address, unverified")
    explicit_content: dict[str, bool] | None = Field(
        None, description="Explicit content filter settings"
    )
    product: str | None = Field(None, description="Subscription level: premium, free, etc.")

    model_config = ConfigDict(title="PrivateUser")


class SimplifiedArtist(CatalogModel):
    external_urls: ExternalUrls = Field(..., description="External URLs for this artist")
    # Local files in a playlist carry artists without identifiers.
    href: str | None = Field(..., description="Spotify Web API endpoint for this artist")
    id: str | None = Field(..., description="Spotify ID of the artist")
    name: str = Field(..., description="Artist name")
    type: Literal["artist"] = Field(..., description="Object type, always 'artist'")
    uri: str | None = Field(..., description="Spotify URI for the artist")

    model_config = ConfigDict(title="SimplifiedArtist")


class Artist(SimplifiedArtist):
    followers: Followers = Field(..., description="Follower count data")
    genres: list[str] = Field(..., description="Genres the artist is associated with")
    images: list[Image] = Field(..., description="Artist images in various sizes, widest first")
    popularity: int = Field(..., description="Popularity (0-100)")

    model_config = ConfigDict(title="Artist")


class SimplifiedTrack(CatalogModel):
    artists: list[SimplifiedArtist] = Field(..., description="Artists who performed the track")
    # Left out when the request names a market.
    available_markets: list[str] | None = Field(
        None, description="Country codes where the track can be streamed"
    )
    disc_number: int = Field(..., description="Disc number (for albums with multiple discs)")
    duration_ms: int = Field(..., description="Track length in milliseconds")
    explicit: bool = Field(..., description="True if the track has explicit lyrics/content")
    external_urls: ExternalUrls = Field(..., description="External URLs for this track")
    # Null for a local file.
    href: str | None = Field(..., description="Spotify Web API endpoint for this track")
    id: str | None = Field(..., description="Spotify ID of the track")
    is_playable: bool | None = Field(
        None, description="Whether the track is playable in the requested market"
    )
    linked_from: LinkedFrom | None = Field(
        None, description="Linking information if this track replaces another"
    )
    restrictions: Restriction | None = Field(
        None, description="Present when a content restriction applies"
    )
    name: str = Field(..., description="Track name")
    preview_url: str | None = Field(..., description="30-second MP3 preview URL, or null")
    track_number: int = Field(..., description="Position of the track on its disc")
    type: Literal["track"] = Field(..., description="Object type, always 'track'")
    uri: str | None = Field(..., description="Spotify URI for the track")
    is_local: bool = Field(..., description="True if the track is a local file")

    model_config = ConfigDict(title="SimplifiedTrack")


class SimplifiedAlbum(CatalogModel):
    # The album of a local file comes with its identifiers and release data set to null.
    album_type: AlbumType | None = Field(
        ..., description="Album type: album, single or compilation"
    )
    total_tracks: int | None = Field(None, description="Total number of tracks on the album")
    available_markets: list[str] | None = Field(
        None, description="Country codes where the album is available"
    )
    external_urls: ExternalUrls = Field(..., description="External URLs for this album")
    href: str | None = Field(..., description="Spotify Web API endpoint for this album")
    id: str | None = Field(..., description="Spotify ID of the album")
    images: list[Image] = Field(..., description="Cover art in various sizes, widest first")
    name: str = Field(..., description="Album name")
    release_date: str | None = Field(
        ..., description="First release date: year, year-month or full date"
    )
    release_date_precision: DatePrecisionType | None = Field(
        ..., description="Precision of release_date"
    )
    restrictions: Restriction | None = Field(
        None, description="Present when a content restriction applies"
    )
    type: Literal["album"] = Field(..., description="Object type, always 'album'")
    uri: str | None = Field(..., description="Spotify URI for the album")
    artists: list[SimplifiedArtist] = Field(..., description="Artists of the album")
    album_group: str | None = Field(
        None, description="Relationship to the artist, only on an artist's album listing"
    )

    model_config = ConfigDict(title="SimplifiedAlbum")


class Album(SimplifiedAlbum):
    tracks: Paging[SimplifiedTrack] = Field(..., description="First page of the album's tracks")
    copyrights: list[Copyright] = Field(..., description="Copyright statements of the album")
    external_ids: ExternalIds = Field(..., description="Known external IDs for the album")
    genres: list[str] = Field(..., description="Genres of the album, often empty")
    label: str = Field(..., description="Label associated with the album")
    popularity: int = Field(..., description="Popularity (0-100)")

    model_config = ConfigDict(title="Album")


class Track(SimplifiedTrack):
    album: SimplifiedAlbum = Field(..., description="Album the track appears on")
    external_ids: ExternalIds = Field(..., description="Known external IDs for the track")
    popularity: int = Field(..., description="Popularity (0-100)")

    model_config = ConfigDict(title="Track")


class SimplifiedShow(CatalogModel):
    available_markets: list[str] | None = Field(
        None, description="Country codes where the show is available"
    )
    copyrights: list[Copyright] = Field(..., description="Copyright statements of the show")
    description: str = Field(..., description="Show description, HTML stripped")
    html_description: str = Field(..., description="Show description, may contain HTML")
    explicit: bool = Field(..., description="True if the show has explicit content")
    external_urls: ExternalUrls = Field(..., description="External URLs for this show")
    href: str = Field(..., description="Spotify Web API endpoint for this show")
    id: str = Field(..., description="Spotify ID of the show")
    images: list[Image] = Field(..., description="Cover art in various sizes, widest first")
    is_externally_hosted: bool | None = Field(
        ..., description="True if the episodes are hosted outside Spotify"
    )
    languages: list[str] = Field(..., description="ISO 639 codes of the languages used")
    media_type: str = Field(..., description="Media type of the show")
    name: str = Field(..., description="Show name")
    publisher: str = Field(..., description="Publisher of the show")
    type: Literal["show"] = Field(..., description="Object type, always 'show'")
    uri: str = Field(..., description="Spotify URI for the show")
    total_episodes: int = Field(..., description="Total number of episodes")

    model_config = ConfigDict(title="SimplifiedShow")


class SimplifiedEpisode(CatalogModel):
    audio_preview_url: str | None = Field(..., description="30-second MP3 preview URL, or null")
    description: str = Field(..., description="Episode description, HTML stripped")
    html_description: str = Field(..., description="Episode description, may contain HTML")
    duration_ms: int = Field(..., description="Episode length in milliseconds")
    explicit: bool = Field(..., description="True if the episode has explicit content")
    external_urls: ExternalUrls = Field(..., description="External URLs for this episode")
    href: str = Field(..., description="Spotify Web API endpoint for this episode")
    id: str = Field(..., description="Spotify ID of the episode")
    images: list[Image] = Field(..., description="Cover art in various sizes, widest first")
    is_externally_hosted: bool = Field(..., description="True if hosted outside Spotify")
    is_playable: bool = Field(..., description="True if playable in the given market")
    language: str | None = Field(None, description="Deprecated, use languages")
    languages: list[str] = Field(..., description="ISO 639 codes of the languages used")
    name: str = Field(..., description="Episode name")
    release_date: str = Field(..., description="First release date")
    release_date_precision: DatePrecisionType = Field(
        ..., description="Precision of release_date"
    )
    resume_point: ResumePoint | None = Field(
        None, description="User's most recent position, needs user-read-playback-position"
    )
    restrictions: Restriction | None = Field(
        None, description="Present when a content restriction applies"
    )
    type: Literal["episode"] = Field(..., description="Object type, always 'episode'")
    uri: str = Field(..., description="Spotify URI for the episode")

    model_config = ConfigDict(title="SimplifiedEpisode")


class Episode(SimplifiedEpisode):
    show: SimplifiedShow = Field(..., description="Show the episode belongs to")

    model_config = ConfigDict(title="Episode")


class Show(SimplifiedShow):
    episodes: Paging[SimplifiedEpisode] = Field(..., description="First page of episodes")

    model_config = ConfigDict(title="Show")


class Author(CatalogModel):
    name: str = Field(..., description="Name of the author")


class Narrator(CatalogModel):
    name: str = Field(..., description="Name of the narrator")


class SimplifiedAudiobook(CatalogModel):
    authors: list[Author] = Field(..., description="Authors of the audiobook")
    available_markets: list[str] | None = Field(
        None, description="Country codes where the audiobook is available"
    )
    copyrights: list[Copyright] = Field(..., description="Copyright statements")
    description: str = Field(..., description="Audiobook description, HTML stripped")
    html_description: str = Field(..., description="Audiobook description, may contain HTML")
    edition: str | None = Field(None, description="Edition of the audiobook")
    explicit: bool = Field(..., description="True if the audiobook has explicit content")
    external_urls: ExternalUrls = Field(..., description="External URLs for this audiobook")
    href: str = Field(..., description="Spotify Web API endpoint for this audiobook")
    id: str = Field(..., description="Spotify ID of the audiobook")
    images: list[Image] = Field(..., description="Cover art in various sizes, widest first")
    languages: list[str] = Field(..., description="ISO 639 codes of the languages used")
    media_type: str = Field(..., description="Media type of the audiobook")
    name: str = Field(..., description="Audiobook name")
    narrators: list[Narrator] = Field(..., description="Narrators of the audiobook")
    publisher: str = Field(..., description="Publisher of the audiobook")
    type: Literal["audiobook"] = Field(..., description="Object type, always 'audiobook'")
    uri: str = Field(..., description="Spotify URI for the audiobook")
    total_chapters: int = Field(..., description="Number of chapters in the audiobook")

    model_config = ConfigDict(title="SimplifiedAudiobook")


class SimplifiedChapter(CatalogModel):
    audio_preview_url: str | None = Field(..., description="30-second MP3 preview URL, or null")
    available_markets: list[str] | None = Field(
        None, description="Country codes where the chapter can be played"
    )
    chapter_number: int = Field(..., description="Number of the chapter")
    description: str = Field(..., description="Chapter description, HTML stripped")
    duration_ms: int = Field(..., description="Chapter length in milliseconds")
    explicit: bool = Field(..., description="True if the chapter has explicit content")
    external_urls: ExternalUrls = Field(..., description="External URLs for this chapter")
    href: str = Field(..., description="Spotify Web API endpoint for this chapter")
    html_description: str = Field(..., description="Chapter description, may contain HTML")
    id: str = Field(..., description="Spotify ID of the chapter")
    images: list[Image] = Field(..., description="Cover art in various sizes, widest first")
    is_playable: bool = Field(..., description="True if playable in the given market")
    language: str | None = Field(None, description="ISO 639 code of the language used")
    languages: list[str] = Field(..., description="ISO 639 codes of the languages used")
    name: str = Field(..., description="Chapter name")
    release_date: str = Field(..., description="First release date")
    release_date_precision: DatePrecisionType = Field(
        ..., description="Precision of release_date"
    )
    # Chapters report restrictions as a list; albums and tracks send a single object.
    restrictions: list[Restriction] | None = Field(
        None, description="Present when a content restriction applies"
    )
    resume_point: ResumePoint | None = Field(
        None, description="User's most recent position, needs user-read-playback-position"
    )
    type: Literal["chapter"] = Field(..., description="Object type, always 'chapter'")
    uri: str = Field(..., description="Spotify URI for the chapter")

    model_config = ConfigDict(title="SimplifiedChapter")


class Chapter(SimplifiedChapter):
    audiobook: SimplifiedAudiobook = Field(..., description="Audiobook the chapter belongs to")

    model_config = ConfigDict(title="Chapter")


class Audiobook(SimplifiedAudiobook):
    chapters: Paging[SimplifiedChapter] = Field(..., description="First page of chapters")

    model_config = ConfigDict(title="Audiobook")


PlaylistItem = Annotated[Track | Episode, Field(discriminator="type")]


class VideoThumbnail(CatalogModel):
    url: str | None = Field(None, description="URL of the video thumbnail if available")

    model_config = ConfigDict(title="VideoThumbnail")


class PlaylistTrack(CatalogModel):
    """One entry of a playlist.

    ``track`` is a track or an episode, told apart by its ``type``, or null
    when the item is no longer available.
    """

    added_at: str | None = Field(..., description="When the item was added, null on old playlists")
    added_by: PublicUser | None = Field(..., description="User who added the item")
    is_local: bool = Field(..., description="True if the item is a local file")
    track: PlaylistItem | None = Field(..., description="The track or episode, or null")
    primary_color: str | None = Field(None, description="Primary color of the item artwork")
    video_thumbnail: VideoThumbnail | None = Field(
        None, description="Video thumbnail metadata for the item"
    )

    model_config = ConfigDict(title="PlaylistTrack")


class SimplifiedPlaylist(CatalogModel):
    collaborative: bool = Field(..., description="True if other users can modify the playlist")
    description: str | None = Field(
        ..., description="Playlist description, only for modified, verified playlists"
    )
    external_urls: ExternalUrls = Field(..., description="External URLs for this playlist")
    href: str = Field(..., description="Spotify Web API endpoint for this playlist")
    id: str = Field(..., description="Spotify ID of the playlist")
    images: list[Image] = Field(..., description="Up to three images for the playlist")
    name: str = Field(..., description="Playlist name")
    owner: PublicUser = Field(..., description="User who owns the playlist")
    public: bool | None = Field(
        None, description="True public, false private, null when the status is not relevant"
    )
    snapshot_id: str = Field(..., description="Version identifier of the playlist contents")
    tracks: CollectionReference = Field(..., description="Where to fetch the playlist items")
    type: Literal["playlist"] = Field(..., description="Object type, always 'playlist'")
    uri: str = Field(..., description="Spotify URI for the playlist")
    primary_color: str | None = Field(None, description="Primary color of the playlist artwork")

    model_config = ConfigDict(title="SimplifiedPlaylist")


class Playlist(SimplifiedPlaylist):
    followers: Followers = Field(..., description="Playlist follower count data")
    public: bool | None = Field(
        ..., description="True public, false private, null when the status is not relevant"
    )
    # A page carries href and total too, so nothing from the reference is lost.
    tracks: Paging[PlaylistTrack] = Field(..., description="First page of playlist items")

    model_config = ConfigDict(title="Playlist")


class FeaturedPlaylists(CatalogModel):
    message: str = Field(..., description="Message shown with the featured playlists")
    playlists: Paging[SimplifiedPlaylist] = Field(..., description="Page of featured playlists")

    model_config = ConfigDict(title="FeaturedPlaylists")


class SavedTrack(Saved[Track]):
    kind: Literal["track"] = "track"


class SavedAlbum(Saved[Album]):
    kind: Literal["album"] = "album"


class SavedEpisode(Saved[Episode]):
    kind: Literal["episode"] = "episode"


class SavedShow(Saved[SimplifiedShow]):
    kind: Literal["show"] = "show"


class SavedChapter(Saved[Chapter]):
    kind: Literal["chapter"] = "chapter"
