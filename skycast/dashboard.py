"""Weather lookup page: FastAPI app serving the browser UI and a JSON view-model.

Run with ``uvicorn skycast.dashboard:app``. The config path can be
overridden with SKYCAST_CONFIG.
"""

import logging
import os
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse

from skycast.config.defaults import API_KEY_ENV_VAR
from skycast.config.loader import load_config
from skycast.config.schema import AppConfig
from skycast.ingest.timeline_client import TimelineClient
from skycast.models.forecast import Idle, Ready
from skycast.pipeline.forecast_builder import ForecastBuilder, encode_query, select
from skycast.view.formatters import result_to_dict

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(
    os.environ.get(
        "SKYCAST_CONFIG",
        Path(__file__).parent.parent / "ops" / "configs" / "default.yaml",
    )
)
INDEX_HTML = Path(__file__).parent / "static" / "index.html"

app = FastAPI(title="skycast", version="0.1.0")


def get_config() -> AppConfig:
    return load_config(CONFIG_PATH)


@app.get("/", response_class=HTMLResponse)
def index():
    """The lookup page."""
    return INDEX_HTML.read_text(encoding="utf-8")


@app.get("/api/forecast")
async def get_forecast(query: str = "", day: int = Query(default=0, ge=0)):
    """Forecast view-model for a location; blank queries stay idle."""
    if not query.strip():
        return result_to_dict(Idle())

    config = get_config()
    if not config.provider.api_key.get_secret_value():
        logger.error("No API key configured, rejecting lookup for %s", query)
        raise HTTPException(
            status_code=503,
            detail=f"No API key configured (set provider.api_key or {API_KEY_ENV_VAR})",
        )
    builder = ForecastBuilder(
        TimelineClient.from_config(config.provider),
        max_days=config.forecast.max_days,
    )
    result = await builder.build(encode_query(query))

    if isinstance(result, Ready) and day:
        try:
            result = select(result, day)
        except IndexError as e:
            logger.info("Rejected day=%d for %s", day, query)
            raise HTTPException(status_code=400, detail=str(e))
    return result_to_dict(result)
