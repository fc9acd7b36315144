# payload/adapter.py
from abc import ABC, abstractmethod
from datetime import datetime, timezone
import json

from mvc.weather_type import WeatherType

class IPayloadAdapter(ABC):
    """Converts a WeatherType into a transport payload (str)."""
    @abstractmethod
    def to_text(self, weather: WeatherType) -> str:
        ...

class WeatherPayloadAdapter(IPayloadAdapter):
    """
    Builds the compact JSON weather event:
      {"ts": "...Z", "weather": "RAINY", "description": "rainy"}
    Options:
      - include_ts: add a UTC timestamp; turn off for reproducible output
    """
    def __init__(self, include_ts: bool = True) -> None:
        self.include_ts = include_ts

    def to_text(self, weather: WeatherType) -> str:
        payload = {}
        if self.include_ts:
            payload["ts"] = datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
        payload["weather"] = weather.name
        payload["description"] = weather.description
        return json.dumps(payload, separators=(",", ":"))  # compact
