"""Provider condition code -> display glyph."""

UNKNOWN_GLYPH = ""

CONDITION_GLYPHS: dict[str, str] = {
    "clear-day": "🌞",
    "clear-night": "🌜",
    "partly-cloudy-day": "⛅",
    "partly-cloudy-night": "🌛",
    "cloudy": "☁️",
    "fog": "🌫️",
    "wind": "🌬️",
    "windy": "🌬️",
    "rain": "🌧️",
    "showers-day": "🌦️",
    "showers-night": "🌧️",
    "snow": "❄️",
    "snow-showers-day": "🌨️",
    "snow-showers-night": "🌨️",
    "sleet": "🌨️",
    "hail": "🌨️",
    "thunderstorm": "⛈️",
    "thunder-rain": "⛈️",
    "thunder-showers-day": "⛈️",
    "thunder-showers-night": "⛈️",
}


def icon_for(condition_code: str | None) -> str:
    """Glyph for a condition code. Unknown codes get UNKNOWN_GLYPH."""
    if not condition_code:
        return UNKNOWN_GLYPH
    return CONDITION_GLYPHS.get(condition_code, UNKNOWN_GLYPH)
