from abc import ABC, abstractmethod

from mvc.weather_type import WeatherType


class ITransition(ABC):
    @abstractmethod
    def next(self, current: WeatherType) -> WeatherType:
        """Return the weather that follows `current`."""
