from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable
from zoneinfo import ZoneInfo

from src.app.ports.output import ILiveTrainProvider, INetworkRepository
from src.domain.algorithms.live_trains import simulate_live_trains_at
from src.domain.models import LiveTrain

DEFAULT_TIMEZONE = "Asia/Kolkata"


@dataclass(slots=True)
class LiveTrainService:
    """Supports the live map view.

    - Prefers an external live-position provider when one is configured.
    - Falls back to the schedule simulator when it is absent or has no data.

    The simulator reads the wall clock of the metro's own time zone, not the
    host's. Aware ``now`` values are converted to it; naive ones are taken
    as metro-local already.
    """

    network_repository: INetworkRepository
    provider: ILiveTrainProvider | None = None
    timezone: str = DEFAULT_TIMEZONE
    clock: Callable[[], datetime] | None = None

    def local_now(self, now: datetime | None = None) -> datetime:
        tz = ZoneInfo(self.timezone)
        if now is None:
            return self.clock() if self.clock is not None else datetime.now(tz)
        if now.tzinfo is not None:
            return now.astimezone(tz)
        return now

    async def list_trains(
        self, *, now: datetime | None = None, lines: set[str] | None = None
    ) -> tuple[LiveTrain, ...]:
        trains: tuple[LiveTrain, ...] | None = None
        if self.provider is not None:
            trains = await self.provider.list_trains()

        if not trains:
            network = self.network_repository.load_network()
            trains = simulate_live_trains_at(network, self.local_now(now))

        if lines:
            wanted = {x.lower() for x in lines}
            trains = tuple(
                t
                for t in trains
                if t.line.lower() in wanted or t.id.split("-", 1)[0].lower() in wanted
            )
        return tuple(trains)
