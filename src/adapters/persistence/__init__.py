from .builtin_network_repository import BuiltinNetworkRepository
from .json_network_repository import JsonNetworkRepository

__all__ = ["BuiltinNetworkRepository", "JsonNetworkRepository"]
