from .access import NearestStation, StationAccess, TravelMode
from .geo import GeoPoint
from .journey import Journey, JourneyLeg
from .network import MetroLine, Network, Station
from .realtime import Direction, LiveTrain
from .timetable import LineTimeline, StationTimetable, TimingSummary

__all__ = [
    "Direction",
    "GeoPoint",
    "Journey",
    "JourneyLeg",
    "LineTimeline",
    "LiveTrain",
    "MetroLine",
    "NearestStation",
    "Network",
    "Station",
    "StationAccess",
    "StationTimetable",
    "TimingSummary",
    "TravelMode",
]
