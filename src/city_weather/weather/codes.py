"""WMO weather code translation."""

from types import MappingProxyType
from typing import Any, Final, Mapping

UNKNOWN_DESCRIPTION: Final[str] = "Unknown condition"
UNKNOWN_ICON: Final[str] = "wi-na"

WEATHER_DESCRIPTIONS: Final[Mapping[int, str]] = MappingProxyType({
    0: "Clear sky",
    1: "Mostly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Fog with frost",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Light rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Light snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Hail",
    80: "Light rain showers",
    81: "Moderate rain showers",
    82: "Heavy rain showers",
    85: "Light snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with light hail",
    99: "Thunderstorm with heavy hail",
})

# Icon classes from the Weather Icons font
_ICON_GROUPS: Final = (
    ("wi-day-sunny", (0, 1)),
    ("wi-day-cloudy", (2,)),
    ("wi-cloud", (3,)),
    ("wi-fog", (45, 48)),
    ("wi-rain", (51, 53, 55, 61, 63, 65, 80, 81, 82)),
    ("wi-snow", (71, 73, 75, 85, 86)),
    ("wi-hail", (77,)),
    ("wi-thunderstorm", (95, 96, 99)),
)

WEATHER_ICONS: Final[Mapping[int, str]] = MappingProxyType({
    code: icon for icon, codes in _ICON_GROUPS for code in codes
})


def _lookup(table: Mapping[int, str], code: Any, fallback: str) -> str:
    # bool is an int subclass but never a weather code
    if isinstance(code, bool) or not isinstance(code, int):
        return fallback
    return table.get(code, fallback)


def describe_weather_code(code: Any) -> str:
    """Translate a WMO weather code into a human-readable description.

    Args:
        code: WMO weather code

    Returns:
        Condition description, or "Unknown condition" for unmapped codes
    """
    return _lookup(WEATHER_DESCRIPTIONS, code, UNKNOWN_DESCRIPTION)


def weather_icon(code: Any) -> str:
    """Translate a WMO weather code into a Weather Icons class name.

    Args:
        code: WMO weather code

    Returns:
        Icon class, or "wi-na" for unmapped codes
    """
    return _lookup(WEATHER_ICONS, code, UNKNOWN_ICON)
