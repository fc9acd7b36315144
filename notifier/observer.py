# notifier/observer.py
from abc import ABC, abstractmethod

from mvc.weather_type import WeatherType


class IObserver(ABC):
    @abstractmethod
    def update(self, weather: WeatherType) -> None:
        """Called when the subject (Model) moves to a new weather."""
        ...


class ISubject(ABC):
    @abstractmethod
    def add_observer(self, observer: IObserver) -> None: ...
    @abstractmethod
    def remove_observer(self, observer: IObserver) -> None: ...
    @abstractmethod
    def notify(self) -> None: ...
