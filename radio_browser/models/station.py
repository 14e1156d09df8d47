"""Station record returned by directory lookups.

The directory service sends many more fields per station (codec, bitrate,
geo coordinates, click counts ...); only the ones this client exposes are
modelled and the rest are ignored on decode.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, TypeAdapter


class RadioStation(BaseModel):
    """A single radio station as listed by the directory.

    ``tags`` is the raw comma-delimited string from the service and is not
    split or normalised here.  ``votes`` may be negative or missing.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    url: str
    tags: str | None = None
    country: str | None = None
    votes: int | None = None


# Shared adapter for decoding a JSON array body straight into stations.
STATION_LIST_ADAPTER: TypeAdapter[list[RadioStation]] = TypeAdapter(list[RadioStation])
