from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from prometheus_fastapi_instrumentator import Instrumentator

from weather_service import settings
from weather_service.api.routes.weather import router as weather_router
from weather_service.api.static_files import ContentTypeStaticFiles
from weather_service.logging_config import configure_logging
from weather_service.tracing import configure_tracing

# ------------------------------------------------------------------
# Configure Observability
# ------------------------------------------------------------------
configure_logging()
configure_tracing()

# The hand-written weather-service.yaml is the published description,
# so FastAPI's generated docs pages are turned off.
app = FastAPI(title="Weather Service", docs_url=None, redoc_url=None)

app.include_router(weather_router)


# ------------------------------------------------------------------
# Health Check
# ------------------------------------------------------------------
@app.get("/health")
def health_check():
    return {"status": "ok"}


# ------------------------------------------------------------------
# API documentation UI
# ------------------------------------------------------------------
@app.get("/swagger", include_in_schema=False, response_class=HTMLResponse)
def swagger_ui():
    return get_swagger_ui_html(
        openapi_url=settings.API_DESCRIPTION_PATH,
        title="weather-service",
    )


# ------------------------------------------------------------------
# Observability
# ------------------------------------------------------------------
FastAPIInstrumentor.instrument_app(app)
Instrumentator().instrument(app).expose(app)

# ------------------------------------------------------------------
# Static files (mounted last: "/" matches every path)
# ------------------------------------------------------------------
app.mount(
    "/",
    ContentTypeStaticFiles(
        directory=settings.web_root(),
        content_types=settings.STATIC_CONTENT_TYPES,
    ),
    name="static",
)
