import uvicorn

from weather_service import settings


def main():
    uvicorn.run(
        "weather_service.main:app",
        host=settings.host(),
        port=settings.port(),
        reload=settings.reload_enabled(),
    )


if __name__ == "__main__":
    main()
