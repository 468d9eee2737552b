from spotify_catalog.client import Client, FetchResult
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
    SavedChapter,
    SavedEpisode,
    SavedShow,
    SavedTrack,
    Show,
    SimplifiedAlbum,
    SimplifiedArtist,
    SimplifiedAudiobook,
    SimplifiedChapter,
    SimplifiedEpisode,
    SimplifiedPlaylist,
    SimplifiedShow,
    SimplifiedTrack,
    Track,
)
from spotify_catalog.errors import (
    CatalogError,
    PayloadError,
    ShapeError,
    StatusError,
    TransportError,
)
from spotify_catalog.schema import Image, Paging, Restriction, Saved
from spotify_catalog.settings import Settings

__all__ = [
    "Album",
    "Artist",
    "AudioFeatures",
    "Audiobook",
    "CatalogError",
    "Category",
    "Chapter",
    "Client",
    "Episode",
    "FeaturedPlaylists",
    "FetchResult",
    "Image",
    "Paging",
    "PayloadError",
    "Playlist",
    "PlaylistTrack",
    "PrivateUser",
    "PublicUser",
    "Restriction",
    "Saved",
    "SavedAlbum",
    "SavedChapter",
    "SavedEpisode",
    "SavedShow",
    "SavedTrack",
    "Settings",
    "ShapeError",
    "Show",
    "SimplifiedAlbum",
    "SimplifiedArtist",
    "SimplifiedAudiobook",
    "SimplifiedChapter",
    "SimplifiedEpisode",
    "SimplifiedPlaylist",
    "SimplifiedShow",
    "SimplifiedTrack",
    "StatusError",
    "Track",
    "TransportError",
]
