from __future__ import annotations

from dataclasses import dataclass, field

from src.app.ports.output import INetworkRepository
from src.domain.models import Network

from .kolkata_metro import build_network


@dataclass(slots=True)
class BuiltinNetworkRepository(INetworkRepository):
    """Serves the bundled Kolkata Metro table."""

    _network: Network | None = field(default=None, init=False, repr=False)

    def load_network(self) -> Network:
        if self._network is None:
            self._network = build_network()
        return self._network
