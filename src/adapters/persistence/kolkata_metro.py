"""Kolkata Metro network table.

Sources: Metro Railway Kolkata, KMRCL, OpenStreetMap. Rows are
(id, name, lat, lon, is_interchange) in UP order.
"""

from __future__ import annotations

from src.domain.models import MetroLine, Network, Station

_Row = tuple[str, str, float, float, bool]

BLUE: tuple[_Row, ...] = (
    ("dak", "Dakshineswar", 22.6548, 88.3582, False),
    ("bar", "Baranagar", 22.6457, 88.3653, False),
    ("noa", "Noapara", 22.6391, 88.3904, True),
    ("dum", "Dum Dum", 22.6225, 88.3785, False),
    ("bel", "Belgachia", 22.6053, 88.3813, False),
    ("shyam", "Shyambazar", 22.6009, 88.3713, False),
    ("shova", "Shovabazar Sutanuti", 22.5956, 88.3643, False),
    ("gir", "Girish Park", 22.5866, 88.3601, False),
    ("mg", "Mahatma Gandhi Road", 22.5815, 88.3601, False),
    ("cen", "Central", 22.5684, 88.3601, False),
    ("cha", "Chandni Chowk", 22.5653, 88.3563, False),
    ("esp", "Esplanade", 22.5645, 88.3506, True),
    ("par", "Park Street", 22.5539, 88.3501, False),
    ("mai", "Maidan", 22.5459, 88.3496, False),
    ("rab_s", "Rabindra Sadan", 22.5386, 88.3486, False),
    ("net_b", "Netaji Bhavan", 22.5323, 88.3475, False),
    ("jat", "Jatin Das Park", 22.5222, 88.3475, False),
    ("kal", "Kalighat", 22.5186, 88.3470, False),
    ("rab_sa", "Rabindra Sarobar", 22.5056, 88.3456, False),
    ("mukh", "Mahanayak Uttam Kumar", 22.4947, 88.3463, False),
    ("net_s", "Netaji", 22.4842, 88.3463, False),
    ("mas", "Masterda Surya Sen", 22.4745, 88.3603, False),
    ("git", "Gitanjali", 22.4645, 88.3743, False),
    ("knaz", "Kavi Nazrul", 22.4545, 88.3883, False),
    ("shuk", "Shahid Khudiram", 22.4445, 88.3983, False),
    ("ksub", "Kavi Subhash", 22.4345, 88.4083, True),
)

GREEN: tuple[_Row, ...] = (
    ("hm", "Howrah Maidan", 22.5855, 88.3243, False),
    ("hw", "Howrah Station", 22.5823, 88.3421, False),
    ("mk", "Mahakaran", 22.5745, 88.3486, False),
    ("esp_g", "Esplanade", 22.5645, 88.3506, True),
    ("sea", "Sealdah", 22.5671, 88.3712, False),
    ("phoo", "Phoolbagan", 22.5735, 88.3905, False),
    ("sls", "Salt Lake Stadium", 22.5755, 88.4021, False),
    ("bc", "Bengal Chemical", 22.5835, 88.4098, False),
    ("cc", "City Centre", 22.5875, 88.4143, False),
    ("cp", "Central Park", 22.5895, 88.4201, False),
    ("kar", "Karunamoyee", 22.5855, 88.4285, False),
    ("slsv", "Salt Lake Sector V", 22.5785, 88.4356, True),
)

PURPLE: tuple[_Row, ...] = (
    ("joka", "Joka", 22.4372, 88.3042, False),
    ("thak", "Thakurpukur", 22.4505, 88.3072, False),
    ("sakh", "Sakherbazar", 22.4665, 88.3115, False),
    ("bc_p", "Behala Chowrasta", 22.4825, 88.3168, False),
    ("bb_p", "Behala Bazar", 22.4925, 88.3212, False),
    ("tar", "Taratala", 22.5028, 88.3242, False),
    ("maj", "Majerhat", 22.5185, 88.3248, False),
)

YELLOW: tuple[_Row, ...] = (
    ("noa_y", "Noapara", 22.6391, 88.3904, True),
    ("ddc", "Dum Dum Cantonment", 22.6455, 88.4105, False),
)

ORANGE: tuple[_Row, ...] = (
    ("ksub_o", "Kavi Subhash", 22.4345, 88.4083, True),
    ("sray", "Satyajit Ray", 22.4545, 88.4115, False),
    ("jnandi", "Jyotirindra Nandi", 22.4785, 88.4152, False),
    ("ksuk", "Kavi Sukanta", 22.4925, 88.4182, False),
    ("hmukh", "Hemanta Mukhopadhyay", 22.5125, 88.4215, False),
)

# (line id, display name, line key, color, rows) in declared order.
LINES: tuple[tuple[str, str, str, str, tuple[_Row, ...]], ...] = (
    ("blue", "Blue Line", "Blue", "#0066b3", BLUE),
    ("green", "Green Line", "Green", "#00a651", GREEN),
    ("purple", "Purple Line", "Purple", "#8e2f8e", PURPLE),
    ("yellow", "Yellow Line", "Yellow", "#fdb913", YELLOW),
    ("orange", "Orange Line", "Orange", "#f37021", ORANGE),
)


def build_network() -> Network:
    lines: list[MetroLine] = []
    for line_id, name, key, color, rows in LINES:
        stations = tuple(
            Station(
                id=sid,
                name=sname,
                lat=lat,
                lon=lon,
                line=key,
                is_interchange=interchange,
            )
            for sid, sname, lat, lon, interchange in rows
        )
        lines.append(MetroLine(id=line_id, name=name, color=color, stations=stations))
    return Network(lines=tuple(lines))
