import os

APP_NAME = "IoT Weather Station"

# REFRESH LOOP
REFRESH_INTERVAL = float(os.environ.get("WEATHER_REFRESH_INTERVAL", 60)) # seconds
SIMULATED_DELAY = float(os.environ.get("WEATHER_SIMULATED_DELAY", 1.0)) # seconds
HISTORY_SIZE = int(os.environ.get("WEATHER_HISTORY_SIZE", 24))

# SERVER
HOST = os.environ.get("WEATHER_HOST", "0.0.0.0")
PORT = int(os.environ.get("WEATHER_PORT", 8000))

# LOGGING
LOG_LEVEL = os.environ.get("WEATHER_LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("WEATHER_LOG_FILE")
