# power_report/scrapers/next_data.py
#
# nba.com is a Next.js site: page data is serialised into a single
# <script id="__NEXT_DATA__"> tag. This module is the only place that knows it.

from typing import Type, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from .base_scraper import ParseError, PowerReportError

NEXT_DATA_MARKER = '<script id="__NEXT_DATA__" type="application/json">'
SCRIPT_END = "</script>"

ModelT = TypeVar("ModelT", bound=BaseModel)


class MarkerNotFoundError(PowerReportError):
    """The __NEXT_DATA__ script tag (or its closing tag) is missing."""

    pass


def extract_next_data(html: str, model: Type[ModelT]) -> ModelT:
    """Parses the JSON embedded in the page's __NEXT_DATA__ script into ``model``."""
    start = html.find(NEXT_DATA_MARKER)
    if start == -1:
        raise MarkerNotFoundError("unable to locate __NEXT_DATA__ script tag")
    start += len(NEXT_DATA_MARKER)

    end = html.find(SCRIPT_END, start)
    if end == -1:
        raise MarkerNotFoundError("unable to locate end of __NEXT_DATA__ script tag")

    payload = html[start:end]
    logger.debug(f"Found __NEXT_DATA__ payload ({len(payload)} chars)")
    return parse_json(payload, model, "failed to deserialize __NEXT_DATA__ JSON")


def parse_json(payload: str, model: Type[ModelT], failure: str) -> ModelT:
    """Validates a raw JSON string against ``model``, raising ParseError."""
    try:
        return model.model_validate_json(payload)
    except ValidationError as e:
        raise ParseError(failure) from e
