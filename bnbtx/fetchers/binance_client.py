import logging

import httpx
from pydantic import ValidationError

from bnbtx.config import BinanceEndpoints
from bnbtx.errors import BinanceAPIError, NotFoundError, SourceConnectionError
from bnbtx.models.binance import MultisendReceipt, TransactionList

logger = logging.getLogger(__name__)

TX_LIST_KEYS = frozenset({"txArray", "txNums"})
RECEIPT_KEYS = frozenset({"tx", "hash"})


class BinanceClient:
    """Explorer (transaction lists) and RPC node (receipts) for Binance Chain."""

    def __init__(self, endpoints: BinanceEndpoints):
        self._endpoints = endpoints

    @property
    def endpoints(self) -> BinanceEndpoints:
        return self._endpoints

    async def get_transactions(self, address: str, token: str = "") -> TransactionList:
        params = {"address": address, "rows": str(self._endpoints.rows), "page": "1"}
        if token:
            params["txAsset"] = token

        logger.info("BINANCE EXPLORER: fetching txs for %s token=%s", address, token or "-")
        data = await self._get(f"{self._endpoints.explorer_url}/v1/txs", params, TX_LIST_KEYS)
        try:
            return TransactionList.model_validate(data)
        except ValidationError as exc:
            raise BinanceAPIError(-1, f"Unexpected transaction list ({exc.error_count()} errors)")

    async def get_receipt(self, tx_hash: str) -> MultisendReceipt:
        logger.info("BINANCE RPC: fetching receipt %s...", tx_hash[:12])
        data = await self._get(
            f"{self._endpoints.rpc_url}/v1/tx/{tx_hash}", {"format": "json"}, RECEIPT_KEYS
        )
        try:
            return MultisendReceipt.model_validate(data)
        except ValidationError as exc:
            raise BinanceAPIError(-1, f"Unexpected receipt ({exc.error_count()} errors)")

    async def _get(self, url: str, params: dict, payload_keys: frozenset[str]) -> dict:
        async with httpx.AsyncClient(timeout=self._endpoints.timeout) as client:
            try:
                resp = await client.get(url, params=params)
            except httpx.HTTPError as exc:
                logger.error("BINANCE request to %s failed: %r", url, exc)
                raise SourceConnectionError() from exc

        if resp.status_code == 404:
            raise NotFoundError(f"Not found: {url}")

        try:
            body = resp.json()
        except ValueError:
            body = None

        if not resp.is_success:
            if isinstance(body, dict) and "message" in body:
                raise BinanceAPIError(_error_code(body, resp.status_code), str(body["message"]))
            raise BinanceAPIError(resp.status_code, resp.text[:200])

        if not isinstance(body, dict):
            raise BinanceAPIError(resp.status_code, "Response body is not a JSON object")
        # the explorer sometimes reports failures as a 200 with only code/message
        if "message" in body and not payload_keys & body.keys():
            raise BinanceAPIError(_error_code(body, resp.status_code), str(body["message"]))
        return body


def _error_code(body: dict, default: int) -> int:
    try:
        return int(body.get("code") or default)
    except (TypeError, ValueError):
        return default
