class NetworkError(Exception):
    """Base exception for invalid network data or lookups."""


class EmptyNetwork(NetworkError):
    """Raised when an operation needs stations but the network has none."""


class UnknownStation(NetworkError, LookupError):
    """Raised when a station id does not exist in the network."""

    def __init__(self, station_id: str) -> None:
        super().__init__(f"Unknown station: {station_id}")
        self.station_id = station_id


class UnknownLine(NetworkError, LookupError):
    """Raised when a line id does not exist in the network."""

    def __init__(self, line_id: str) -> None:
        super().__init__(f"Unknown line: {line_id}")
        self.line_id = line_id
