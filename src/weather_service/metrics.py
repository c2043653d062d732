from prometheus_client import Counter, REGISTRY


def safe_counter(name, documentation, **kwargs):
    # Re-importing the module (reload, tests) must not re-register the series.
    try:
        return Counter(name, documentation, **kwargs)
    except ValueError:
        return REGISTRY._names_to_collectors[name]


forecast_requests_total = safe_counter(
    "weather_service_forecast_requests_total",
    "Number of weather forecast requests served",
    labelnames=["units"],
)
