# app.py
from absl import app, flags, logging
from mvc.model import WeatherModel
from mvc.view import OrcsView, HobbitsView, JsonPrintView
from mvc.controller import WeatherController
from payload.adapter import WeatherPayloadAdapter

DEFAULT_TICKS = 4
DEFAULT_INTERVAL = 0.0
PREVIEW_CHARS = 160

FLAGS = flags.FLAGS
flags.DEFINE_integer("ticks", DEFAULT_TICKS, "How many times the weather changes.", lower_bound=0)
flags.DEFINE_float("interval", DEFAULT_INTERVAL, "Seconds to wait between weather changes.", lower_bound=0.0)
flags.DEFINE_bool("json", False, "Also log every weather change as JSON.")

def build(ticks: int = DEFAULT_TICKS, interval: float = DEFAULT_INTERVAL, with_json: bool = False) -> WeatherController:
    # Model
    model = WeatherModel()

    # Views (Observers)
    model.add_observer(OrcsView())
    model.add_observer(HobbitsView())
    if with_json:
        model.add_observer(JsonPrintView(adapter=WeatherPayloadAdapter(), preview_chars=PREVIEW_CHARS))

    # Controller
    return WeatherController(model=model, ticks=ticks, interval=interval)

def main(argv):
    del argv  # unused
    ctrl = build(ticks=FLAGS.ticks, interval=FLAGS.interval, with_json=FLAGS.json)
    logging.info("[APP] Weather is %s. Letting time pass…", ctrl.model.weather)
    ctrl.run()
    logging.info("[APP] Stopped.")

def run():
    app.run(main)

if __name__ == "__main__":
    run()
