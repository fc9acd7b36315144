from typing import List, Optional, Tuple
from absl import logging
from notifier.observer import ISubject, IObserver
from mvc.weather_type import WeatherType, DEFAULT_WEATHER
from transition.base import ITransition
from transition.cyclic import CyclicTransition

class WeatherModel(ISubject):
    """Observable model holding the current weather.

    Observers are notified in registration order every time the weather
    advances. The same observer may be registered more than once and is then
    notified once per registration.
    """
    def __init__(self,
                 initial: WeatherType = DEFAULT_WEATHER,
                 transition: Optional[ITransition] = None) -> None:
        if not isinstance(initial, WeatherType):
            raise TypeError(f"initial weather must be a WeatherType, got {initial!r}")
        self._weather = initial
        self._transition = transition or CyclicTransition()
        self._observers: List[IObserver] = []

    @property
    def weather(self) -> WeatherType:
        return self._weather

    @property
    def observers(self) -> Tuple[IObserver, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: IObserver) -> None:
        self._observers.append(observer)
        logging.debug("[Model] Added observer %s", type(observer).__name__)

    def remove_observer(self, observer: IObserver) -> None:
        # first match only; absent observers are ignored
        if observer in self._observers:
            self._observers.remove(observer)
            logging.debug("[Model] Removed observer %s", type(observer).__name__)

    def notify(self) -> None:
        weather = self._weather
        for obs in list(self._observers):
            try:
                obs.update(weather)
            except Exception:
                logging.exception("[Model] Observer %s failed on %s", type(obs).__name__, weather)
                raise

    def advance(self) -> None:
        self._weather = self._transition.next(self._weather)
        logging.info("The weather changed to %s.", self._weather)
        self.notify()
