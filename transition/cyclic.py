from mvc.weather_type import WeatherType
from .base import ITransition


class CyclicTransition(ITransition):
    """Steps through the enum in declared order, wrapping back to the first member."""
    def next(self, current: WeatherType) -> WeatherType:
        members = list(type(current))
        return members[(members.index(current) + 1) % len(members)]
