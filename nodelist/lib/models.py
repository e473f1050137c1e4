"""Pydantic models for nodelist entries and node addresses."""

import re
from typing import Dict, List, Sequence

from pydantic import BaseModel, Field

from nodelist.lib.errors import AddressSyntaxError, NodelistFormatError
from nodelist.lib.keywords import Keyword

NUMBER_RE = re.compile(r"[0-9]+")
ADDRESS_RE = re.compile(r"([0-9]+):([0-9]+)/([0-9]+)")

# Column layout: keyword, number, name, location, sysop, phone, speed, flags...
MIN_FIELDS = 7


def parse_number(value: str, what: str) -> int:
    """Parse a non-negative decimal field, raising NodelistFormatError otherwise."""
    text = value.strip() if isinstance(value, str) else ""
    if not NUMBER_RE.fullmatch(text):
        raise NodelistFormatError(f"{what} is not a non-negative integer: {value!r}")
    return int(text)


class NodelistEntry(BaseModel):
    """One nodelist line: a zone, a region/host network or a node."""

    kind: Keyword = Field(..., description="Keyword of the line")
    name: str = Field(..., description="System name", examples=["Test_Node"])
    location: str = Field(..., description="System location", examples=["Testville"])
    sysop_name: str = Field(..., description="Sysop name", examples=["John_Doe"])
    phone: str = Field(..., description="Phone number", examples=["-Unpublished-"])
    speed: int = Field(..., ge=0, description="Connection speed", examples=[9600])
    flags: List[str] = Field(default_factory=list, description="Capability flags in file order")
    children: Dict[int, "NodelistEntry"] = Field(
        default_factory=dict,
        description="Child entries keyed by network or node number",
    )

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "NodelistEntry":
        """
        Build an entry from a split nodelist line.

        Args:
            fields: Line fields, at least MIN_FIELDS of them

        Raises:
            ValueError: If fewer than MIN_FIELDS fields are given
            NodelistFormatError: If the speed is not numeric
        """
        if len(fields) < MIN_FIELDS:
            raise ValueError(f"expected at least {MIN_FIELDS} fields, got {len(fields)}")
        return cls(
            kind=Keyword.from_string(fields[0]),
            name=fields[2],
            location=fields[3],
            sysop_name=fields[4],
            phone=fields[5],
            speed=parse_number(fields[6], "speed"),
            flags=list(fields[7:]),
        )

    def has_flag(self, flag: str) -> bool:
        """Check for a flag; ``IBN`` also matches ``IBN:24554``."""
        for value in self.flags:
            if value == flag or value.split(":", 1)[0] == flag:
                return True
        return False

    def __repr__(self):
        return f"NodelistEntry({self.kind.name}, {self.name!r}, speed={self.speed}, children={len(self.children)})"


NodelistEntry.model_rebuild()


class FidoAddress(BaseModel):
    """A ``zone:network/node`` address."""

    zone: int = Field(..., ge=0)
    network: int = Field(..., ge=0)
    node: int = Field(..., ge=0)

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, address: str) -> "FidoAddress":
        """Validate and split an address string."""
        if not isinstance(address, str):
            raise AddressSyntaxError(f"Address must be a string, got {type(address).__name__}")
        match = ADDRESS_RE.fullmatch(address)
        if match is None:
            raise AddressSyntaxError(f"Incorrect address format: {address!r}")
        zone, network, node = (int(group) for group in match.groups())
        return cls(zone=zone, network=network, node=node)

    def __str__(self) -> str:
        return f"{self.zone}:{self.network}/{self.node}"
