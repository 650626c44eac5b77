from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.app.ports.output import INetworkRepository
from src.domain.exceptions import NetworkError
from src.domain.models import MetroLine, Network, Station

logger = logging.getLogger(__name__)


def _parse_line(raw: dict[str, Any]) -> MetroLine:
    line_id = str(raw.get("id") or "").strip()
    if not line_id:
        raise NetworkError("Line entry without an id")

    name = str(raw.get("name") or line_id).strip()
    key = str(raw.get("key") or name.split(" ")[0]).strip()
    color = str(raw.get("color") or "#64748b").strip()

    stations: list[Station] = []
    for entry in raw.get("stations") or []:
        try:
            stations.append(
                Station(
                    id=str(entry["id"]).strip(),
                    name=str(entry["name"]).strip(),
                    lat=float(entry["lat"]),
                    lon=float(entry.get("lon", entry.get("lng"))),
                    line=str(entry.get("line") or key).strip(),
                    is_interchange=bool(
                        entry.get("is_interchange", entry.get("isInterchange", False))
                    ),
                )
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise NetworkError(f"Invalid station entry on line {line_id}: {entry!r}") from exc

    return MetroLine(id=line_id, name=name, color=color, stations=tuple(stations))


@dataclass(slots=True)
class JsonNetworkRepository(INetworkRepository):
    """Loads a network table from a JSON file.

    Expected shape: ``{"lines": [{"id", "name", "key", "color",
    "stations": [{"id", "name", "lat", "lon", "is_interchange"}]}]}``.

    Env vars:
      - METRO_NETWORK_PATH: path to the JSON file
    """

    path: str | Path | None = None

    _network: Network | None = field(default=None, init=False, repr=False)

    def _path(self) -> Path:
        value = self.path or os.getenv("METRO_NETWORK_PATH")
        if not value:
            raise RuntimeError("Missing METRO_NETWORK_PATH")
        return Path(value)

    def load_network(self) -> Network:
        if self._network is not None:
            return self._network

        path = self._path()
        with path.open("r", encoding="utf-8") as fp:
            payload = json.load(fp)

        if not isinstance(payload, dict) or not isinstance(payload.get("lines"), list):
            raise NetworkError(f"{path} has no 'lines' list")

        network = Network(lines=tuple(_parse_line(raw) for raw in payload["lines"]))
        logger.info(
            "Loaded network from %s: %d lines, %d stations",
            path,
            len(network.lines),
            len(network.all_stations),
        )
        self._network = network
        return network
