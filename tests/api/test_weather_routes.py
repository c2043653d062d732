from datetime import date

import pytest

from weather_service.services import forecast_service


def test_get_weather_returns_single_placeholder(client):
    resp = client.get("/weather", params={"city": "Boston"})

    assert resp.status_code == 200
    assert resp.json() == [
        {
            "date": date.today().isoformat(),
            "lowTemperature": 0,
            "highTemperature": 100,
            "summary": "placeholder",
        }
    ]


@pytest.mark.parametrize("units", ["metric", "imperial"])
def test_get_weather_ignores_units(client, units):
    resp = client.get("/weather", params={"city": "Oslo", "units": units})

    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 1
    assert body[0]["lowTemperature"] == 0
    assert body[0]["highTemperature"] == 100
    assert body[0]["summary"] == "placeholder"


def test_get_weather_uses_current_date(client, monkeypatch):
    class FixedDate(date):
        @classmethod
        def today(cls):
            return cls(2024, 2, 29)

    monkeypatch.setattr(forecast_service, "date", FixedDate)

    resp = client.get("/weather", params={"city": "Boston"})

    assert resp.json()[0]["date"] == "2024-02-29"


def test_get_weather_requires_city(client):
    resp = client.get("/weather")
    assert resp.status_code == 422


def test_get_weather_rejects_unknown_units(client):
    resp = client.get("/weather", params={"city": "Boston", "units": "kelvin"})
    assert resp.status_code == 422


def test_get_weather_passes_disconnect_probe_to_service(client, monkeypatch):
    seen = {}

    async def fake_get_weather_forecast(city, units=None, is_disconnected=None):
        seen["city"] = city
        seen["units"] = units
        seen["is_disconnected"] = is_disconnected
        return []

    monkeypatch.setattr(forecast_service, "get_weather_forecast", fake_get_weather_forecast)

    resp = client.get("/weather", params={"city": "Lima", "units": "metric"})

    assert resp.status_code == 200
    assert resp.json() == []
    assert seen["city"] == "Lima"
    assert seen["units"].value == "metric"
    assert callable(seen["is_disconnected"])
