import random
from collections import namedtuple

HEAVY_RAIN_THRESHOLD = 5.0 # mm
CLOUDY_HUMIDITY_THRESHOLD = 60.0 # %

WeatherStatus = namedtuple("WeatherStatus", ["label", "icon", "color"])
MetricCard = namedtuple("MetricCard", ["title", "value", "unit", "icon", "color"])

HEAVY_RAIN = WeatherStatus("Heavy Rain", "cloud-rain", "blue-700")
LIGHT_RAIN = WeatherStatus("Light Rain", "cloud-rain", "blue-500")
CLOUDY = WeatherStatus("Cloudy", "cloud", "gray-500")
SUNNY = WeatherStatus("Sunny", "sun", "yellow-500")


def weather_status(reading):
    if reading.rainfall > HEAVY_RAIN_THRESHOLD:
        return HEAVY_RAIN
    if reading.rainfall > 0:
        return LIGHT_RAIN
    if reading.humidity > CLOUDY_HUMIDITY_THRESHOLD:
        return CLOUDY
    return SUNNY


def feels_like(temperature, rng=None):
    """Apparent temperature shown in the status banner, within 2 °C of the reading."""
    rng = rng or random
    return round(temperature - 2 + rng.random() * 4, 1)


def format_update_time(timestamp):
    # shown in the server's local time
    return timestamp.astimezone().strftime("%H:%M:%S")


def metric_cards(reading):
    return [
        MetricCard("Temperature", reading.temperature, "°C", "thermometer", "red-500"),
        MetricCard("Humidity", reading.humidity, "%", "droplets", "blue-500"),
        MetricCard("Pressure", reading.pressure, "hPa", "bar-chart", "purple-500"),
        MetricCard("Wind", f"{reading.wind_speed} ({reading.wind_direction})", "km/h", "wind", "teal-500"),
        MetricCard("Rainfall", reading.rainfall, "mm", "cloud-rain", "blue-700"),
        MetricCard("UV Index", reading.uv_index, "", "sun", "yellow-500"),
        MetricCard("Last Update", format_update_time(reading.timestamp), "", "clock", "gray-500"),
    ]
