from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import LiveTrain


class ILiveTrainProvider(ABC):
    """Port for externally reported train positions.

    Returning ``None`` (or nothing) means "no data"; callers fall back to the
    schedule simulator.
    """

    @abstractmethod
    async def list_trains(self) -> tuple[LiveTrain, ...] | None:
        raise NotImplementedError
