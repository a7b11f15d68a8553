from enum import Enum

class MediaType(str, Enum):
    movie = "movie"
    series = "series"
