# regions.py
#
# Canonical list of regions the heat map covers (US states + DC).
# Simple dicts – no classes, no fancy stuff.
#
# When a GeoJSON file is configured we read the region list from its
# feature properties instead. We only ever look at properties.state and
# properties.name; geometry is the map's business.

import re
from typing import Any, Dict, List

from errors import GeoDataError

Region = Dict[str, str]

_US_STATES = [
    ("AL", "Alabama"), ("AK", "Alaska"), ("AZ", "Arizona"), ("AR", "Arkansas"),
    ("CA", "California"), ("CO", "Colorado"), ("CT", "Connecticut"),
    ("DE", "Delaware"), ("DC", "District of Columbia"), ("FL", "Florida"),
    ("GA", "Georgia"), ("HI", "Hawaii"), ("ID", "Idaho"), ("IL", "Illinois"),
    ("IN", "Indiana"), ("IA", "Iowa"), ("KS", "Kansas"), ("KY", "Kentucky"),
    ("LA", "Louisiana"), ("ME", "Maine"), ("MD", "Maryland"),
    ("MA", "Massachusetts"), ("MI", "Michigan"), ("MN", "Minnesota"),
    ("MS", "Mississippi"), ("MO", "Missouri"), ("MT", "Montana"),
    ("NE", "Nebraska"), ("NV", "Nevada"), ("NH", "New Hampshire"),
    ("NJ", "New Jersey"), ("NM", "New Mexico"), ("NY", "New York"),
    ("NC", "North Carolina"), ("ND", "North Dakota"), ("OH", "Ohio"),
    ("OK", "Oklahoma"), ("OR", "Oregon"), ("PA", "Pennsylvania"),
    ("RI", "Rhode Island"), ("SC", "South Carolina"), ("SD", "South Dakota"),
    ("TN", "Tennessee"), ("TX", "Texas"), ("UT", "Utah"), ("VT", "Vermont"),
    ("VA", "Virginia"), ("WA", "Washington"), ("WV", "West Virginia"),
    ("WI", "Wisconsin"), ("WY", "Wyoming"),
]

US_REGIONS: List[Region] = [{"code": code, "name": name} for code, name in _US_STATES]

# Two or three capital letters: "TX", "DC", "PRI".
REGION_CODE_RE = re.compile(r"^[A-Z]{2,3}\Z")


def is_valid_region_code(code: Any) -> bool:
    return isinstance(code, str) and REGION_CODE_RE.match(code) is not None


def regions_from_geojson(data: Dict[str, Any]) -> List[Region]:
    """
    Pull {code, name} records out of a GeoJSON FeatureCollection.

    Features without a code are skipped. Duplicate codes keep the first one.
    Raises GeoDataError if the thing isn't a FeatureCollection or nothing
    usable is left.
    """
    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise GeoDataError("geo data is not a GeoJSON FeatureCollection")

    out: List[Region] = []
    seen = set()
    for feature in data.get("features") or []:
        props = (feature or {}).get("properties") or {}
        code = props.get("state")
        if not code:
            continue
        code = str(code)
        if code in seen:
            continue
        seen.add(code)
        out.append({"code": code, "name": str(props.get("name") or code)})

    if not out:
        raise GeoDataError("geo data has no features with a 'state' property")

    return out


def region_names(regions: List[Region]) -> Dict[str, str]:
    return {r["code"]: r["name"] for r in regions}
