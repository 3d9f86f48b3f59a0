"""Data models for theca."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from .errors import TimestampError

NOSTATUS = ""
STARTED = "Started"
URGENT = "Urgent"

Status = Literal["", "Started", "Urgent"]

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_timestamp() -> str:
    """Current UTC time in the format stored in ``last_touched``.

    Raises:
        TimestampError: If the clock value cannot be formatted.
    """
    try:
        return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, ValueError) as e:
        raise TimestampError(str(e)) from e


class Item(BaseModel):
    """A single note."""

    model_config = ConfigDict(extra="forbid", strict=True)

    id: NonNegativeInt
    title: str
    status: Status = Field(..., description="Empty, Started or Urgent")
    body: str
    last_touched: str = Field(..., description="UTC, YYYY-MM-DD HH:MM:SS")


class Profile(BaseModel):
    """A collection of notes persisted as one file."""

    model_config = ConfigDict(extra="forbid", strict=True)

    encrypted: bool
    notes: list[Item]


@dataclass
class Stats:
    """Aggregate counts over a profile."""

    encrypted: bool
    total: int
    none: int
    started: int
    urgent: int
