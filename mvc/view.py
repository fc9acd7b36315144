# mvc/view.py
from typing import Dict, Optional
from absl import logging
from notifier.observer import IObserver
from mvc.weather_type import WeatherType
from payload.adapter import IPayloadAdapter

class RaceView(IObserver):
    """Observer that logs how a race reacts to the weather.

    Subclasses only supply the REACTIONS table. Weathers missing from the
    table are ignored.
    """
    REACTIONS: Dict[WeatherType, str] = {}

    def reaction(self, weather: WeatherType) -> Optional[str]:
        return self.REACTIONS.get(weather)

    def update(self, weather: WeatherType) -> None:
        text = self.reaction(weather)
        if text is None:
            return
        logging.info("%s", text)

class OrcsView(RaceView):
    REACTIONS = {
        WeatherType.SUNNY: "The orcs' eyes hurt in the bright sun.",
        WeatherType.RAINY: "The orcs are dripping wet.",
        WeatherType.WINDY: "The orc smell almost vanishes in the wind.",
        WeatherType.COLD: "The orcs are freezing cold.",
    }

class HobbitsView(RaceView):
    REACTIONS = {
        WeatherType.SUNNY: "The happy hobbits bade in the warm sun.",
        WeatherType.RAINY: "The hobbits look for cover from the rain.",
        WeatherType.WINDY: "The hobbits hold their hats tightly in the windy weather.",
        WeatherType.COLD: "The hobbits are shivering in the cold weather.",
    }

class JsonPrintView(IObserver):
    """Observer that converts weather → JSON via Adapter, then logs it."""
    def __init__(self, adapter: IPayloadAdapter, preview_chars: int = 160) -> None:
        self.adapter = adapter
        self.preview_chars = preview_chars

    def update(self, weather: WeatherType) -> None:
        text = self.adapter.to_text(weather)
        preview = text[: self.preview_chars] + ("..." if len(text) > self.preview_chars else "")
        logging.info("[JSON] %s", preview)
