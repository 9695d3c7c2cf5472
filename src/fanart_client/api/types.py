"""
Request Parameter Types

Selectors accepted by the Fanart.tv movie webservice, and the tables
that turn each of them into a URL path segment.
"""

from enum import Enum


class ResponseFormat(Enum):
    """Serialization the remote service should answer with."""
    JSON = "json"
    PHP = "php"  # PHP serialize() key-value array


class ImageCategory(Enum):
    """Which class of artwork to search for."""
    ALL = "all"
    MOVIE_LOGO = "movielogo"
    MOVIE_ART = "movieart"
    MOVIE_DISC_OVERLAY = "moviedisc"


class SortOrder(Enum):
    """How the service orders matching images."""
    MOST_POPULAR_THEN_NEWEST = "most_popular_then_newest"
    NEWEST = "newest"
    OLDEST = "oldest"


class ResultLimit(Enum):
    """How many matches the service returns."""
    FIRST = "first"
    ALL = "all"


FORMAT_TOKENS = {
    ResponseFormat.JSON: "json",
    ResponseFormat.PHP: "php",
}

CATEGORY_TOKENS = {
    ImageCategory.ALL: "all",
    ImageCategory.MOVIE_LOGO: "movielogo",
    ImageCategory.MOVIE_ART: "movieart",
    ImageCategory.MOVIE_DISC_OVERLAY: "moviedisc",
}

# Ordinals are 1-based declaration positions
SORT_ORDINALS = {
    SortOrder.MOST_POPULAR_THEN_NEWEST: 1,
    SortOrder.NEWEST: 2,
    SortOrder.OLDEST: 3,
}

LIMIT_ORDINALS = {
    ResultLimit.FIRST: 1,
    ResultLimit.ALL: 2,
}


def format_token(response_format: ResponseFormat) -> str:
    """Lowercase path token for a response format."""
    return FORMAT_TOKENS[response_format]


def category_token(category: ImageCategory) -> str:
    """Lowercase path token for an image category."""
    return CATEGORY_TOKENS[category]


def sort_ordinal(sort: SortOrder) -> int:
    """Path ordinal for a sort order."""
    return SORT_ORDINALS[sort]


def limit_ordinal(limit: ResultLimit) -> int:
    """Path ordinal for a result limit."""
    return LIMIT_ORDINALS[limit]
