import time
from typing import List
from absl import logging
from mvc.model import WeatherModel
from mvc.weather_type import WeatherType

class WeatherController:
    """
    Controller:
      - lets time pass on the model, one tick at a time
      - each tick advances the weather and notifies the model's observers
      - optional pause between ticks
    """
    def __init__(self,
                 model: WeatherModel,
                 ticks: int = 4,
                 interval: float = 0.0) -> None:
        if ticks < 0:
            raise ValueError(f"ticks must be >= 0, got {ticks}")
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")
        self.model = model
        self.ticks = ticks
        self.interval = interval

    def tick(self) -> WeatherType:
        self.model.advance()
        return self.model.weather

    def run(self) -> List[WeatherType]:
        reached = []
        for i in range(self.ticks):
            if i and self.interval:
                time.sleep(self.interval)
            reached.append(self.tick())
        logging.debug("Controller: %d ticks done, weather is %s", self.ticks, self.model.weather)
        return reached
