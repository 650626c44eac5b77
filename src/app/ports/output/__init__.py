from .live_train_provider import ILiveTrainProvider
from .network_repository import INetworkRepository
from .road_route_provider import IRoadRouteProvider

__all__ = [
    "ILiveTrainProvider",
    "INetworkRepository",
    "IRoadRouteProvider",
]
