import os
import logging
import logging.config

import yaml
from fastapi import FastAPI, HTTPException

from api.schemas import LinksRequest, LinksResponse, LinkSchema
from autolink.config import default_config, load_config, parse_mask
from autolink.diagnostics import LoggingDiagnostics
from autolink.pipeline import Linkifier


def setup_logging():
    cfg_path = os.path.join("configs", "logging.yaml")
    if os.path.exists(cfg_path):
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            os.makedirs("logs", exist_ok=True)
            logging.config.dictConfig(config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"[logging] Failed to load logging.yaml: {e}")
            logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.INFO)


def load_linkifier() -> Linkifier:
    cfg_path = os.environ.get("AUTOLINK_CONFIG", os.path.join("configs", "linkify.yaml"))
    config = load_config(cfg_path) if os.path.exists(cfg_path) else default_config()
    return Linkifier.from_config(config, diagnostics=LoggingDiagnostics())


setup_logging()
logger = logging.getLogger("api")

linkifier = load_linkifier()

app = FastAPI(
    title="Autolink",
    version="0.1.0",
    description="Find web URLs and email addresses in plain text.",
)


@app.post("/links", response_model=LinksResponse)
def links(req: LinksRequest) -> LinksResponse:
    logger.info("Received /links request (%d chars)", len(req.text))

    mask = None
    if req.detectors is not None:
        try:
            mask = parse_mask(req.detectors)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    found = linkifier.add_auto_links(req.text, mask)
    if found is None:
        return LinksResponse(found=False, links=[])

    return LinksResponse(
        found=True,
        links=[LinkSchema(url=link.url, start=link.start, end=link.end) for link in found],
    )
