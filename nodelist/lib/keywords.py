"""Nodelist line keywords and their routing classification."""

from enum import Enum


class LineType(str, Enum):
    """Where a line is placed in the tree."""

    ZONE = "zone"
    REGION = "region"
    HOST = "host"
    DEFAULT = "default"


class Keyword(str, Enum):
    """
    Keyword found in the first field of a nodelist line.

    NODE is the catch-all: ordinary node lines carry an empty keyword, and
    unknown tokens are treated the same way instead of failing.
    """

    ZONE = "Zone"
    REGION = "Region"
    HOST = "Host"
    HUB = "Hub"
    PVT = "Pvt"
    HOLD = "Hold"
    DOWN = "Down"
    NODE = ""

    @classmethod
    def from_string(cls, token: str) -> "Keyword":
        """Classify a raw keyword field. Never raises."""
        if not isinstance(token, str):
            return cls.NODE
        return _BY_NAME.get(token.strip().lower(), cls.NODE)

    @property
    def line_type(self) -> LineType:
        return _LINE_TYPES.get(self, LineType.DEFAULT)


_BY_NAME = {keyword.value.lower(): keyword for keyword in Keyword if keyword.value}

_LINE_TYPES = {
    Keyword.ZONE: LineType.ZONE,
    Keyword.REGION: LineType.REGION,
    Keyword.HOST: LineType.HOST,
}


def classify(token: str) -> LineType:
    """Map the first field of a line to its routing line type."""
    return Keyword.from_string(token).line_type
