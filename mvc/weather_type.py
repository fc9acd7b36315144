# mvc/weather_type.py
from enum import Enum


class WeatherType(Enum):
    """Weather states, in the order the weather cycles through them."""
    SUNNY = "sunny"
    RAINY = "rainy"
    WINDY = "windy"
    COLD = "cold"

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.description


DEFAULT_WEATHER = WeatherType.SUNNY
