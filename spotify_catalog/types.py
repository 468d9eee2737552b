from typing import Literal

AlbumType = Literal["album", "single", "compilation"]
DatePrecisionType = Literal["year", "month", "day"]
SavedKindType = Literal["track", "album", "episode", "show", "chapter"]
