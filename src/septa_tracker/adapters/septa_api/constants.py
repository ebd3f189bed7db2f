"""Constants for the SEPTA API adapter.

Real-time endpoints live on www3.septa.org; reference data (stops,
schedules, advisories) is served as static JSON by a companion service.
No authentication required.
"""

TRAIN_VIEW_PATH = "/TrainView/index.php"
NEXT_TO_ARRIVE_PATH = "/NextToArrive/index.php"

STOPS_PATH = "/stops"
SCHEDULES_PATH = "/schedules"
ADVISORIES_PATH = "/advisories"

# NextToArrive query parameter names
PARAM_START = "req1"
PARAM_END = "req2"
PARAM_LIMIT = "req3"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
