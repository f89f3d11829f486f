import logging

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from bnbtx.classifiers.binance_normalizer import BinanceNormalizer
from bnbtx.config import settings
from bnbtx.errors import (
    BinanceAPIError,
    InvalidAddressError,
    NotFoundError,
    SourceConnectionError,
)
from bnbtx.fetchers import fetch_normalized_page
from bnbtx.fetchers.binance_client import BinanceClient
from bnbtx.validation.input import validate_address, validate_token

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("bnbtx.main")

app = FastAPI(title="BNB Transaction Normalizer", version="0.1.0")

binance_client = BinanceClient(settings.endpoints())
normalizer = BinanceNormalizer(binance_client)


def get_client() -> BinanceClient:
    return binance_client


def get_normalizer() -> BinanceNormalizer:
    return normalizer


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("INCOMING REQUEST: %s %s?%s", request.method, request.url.path, request.url.query)
    response = await call_next(request)
    logger.info(
        "RESPONSE: %s %s -> %s",
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return PlainTextResponse(str(exc), status_code=404)


@app.exception_handler(InvalidAddressError)
async def invalid_address_handler(request: Request, exc: InvalidAddressError):
    return PlainTextResponse(str(exc), status_code=400)


@app.exception_handler(SourceConnectionError)
async def source_connection_handler(request: Request, exc: SourceConnectionError):
    return PlainTextResponse("connection to Binance API failed", status_code=502)


@app.exception_handler(BinanceAPIError)
async def binance_api_error_handler(request: Request, exc: BinanceAPIError):
    logger.warning("Binance API error on %s: %s", request.url.path, exc)
    return PlainTextResponse("Binance API returned an error", status_code=502)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error: %s", exc)
    return PlainTextResponse("Internal Server Error", status_code=500)


@app.get("/v1/binance")
async def binance_info():
    return {
        "coin": "binance",
        "description": "GET a Binance Chain address to list its normalized transfers.",
        "usage": {
            "method": "GET",
            "path": "/v1/binance/{address}",
            "query": {"token": "optional token symbol, e.g. TWT-8C2"},
        },
    }


@app.get("/v1/binance/{address}")
async def get_transactions(
    address: str,
    token: str = Query(default=""),
    client: BinanceClient = Depends(get_client),
    tx_normalizer: BinanceNormalizer = Depends(get_normalizer),
):
    address = validate_address(address)
    token = validate_token(token)

    page = await fetch_normalized_page(
        client,
        tx_normalizer,
        address,
        token,
        page_size=settings.page_size,
        concurrency=settings.receipt_concurrency,
        deadline=settings.request_deadline,
    )
    logger.info("NORMALIZED: %s token=%s -> %d txs", address, token or "-", page.total)
    return JSONResponse(content=page.model_dump(mode="json", by_alias=True))
