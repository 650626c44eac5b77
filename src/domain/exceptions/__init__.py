from .network import EmptyNetwork, NetworkError, UnknownLine, UnknownStation

__all__ = ["EmptyNetwork", "NetworkError", "UnknownLine", "UnknownStation"]
