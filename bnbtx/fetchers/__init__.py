import asyncio
import logging

from bnbtx.classifiers.binance_normalizer import BinanceNormalizer
from bnbtx.fetchers.binance_client import BinanceClient
from bnbtx.models.binance import RawTransaction
from bnbtx.models.tx import Tx, TxPage

logger = logging.getLogger(__name__)

TX_PER_PAGE = 25
REQUEST_DEADLINE = 15.0


async def fetch_normalized_page(
    client: BinanceClient,
    normalizer: BinanceNormalizer,
    address: str,
    token: str = "",
    page_size: int = TX_PER_PAGE,
    concurrency: int = 4,
    deadline: float = REQUEST_DEADLINE,
) -> TxPage:
    tx_list = await client.get_transactions(address, token)
    semaphore = asyncio.Semaphore(max(concurrency, 1))
    expires_at = asyncio.get_running_loop().time() + deadline

    async def _normalize(raw_tx: RawTransaction) -> tuple[Tx | None, bool]:
        async with semaphore:
            try:
                # records that need no lookup finish without yielding, so only lookups expire
                async with asyncio.timeout_at(expires_at):
                    return await normalizer.normalize(raw_tx, token, address)
            except TimeoutError:
                logger.warning("Request deadline passed before %s was normalized, skipping", raw_tx.hash)
                return None, False

    # a failure in one task cancels the remaining lookups
    async with asyncio.TaskGroup() as tg:
        tasks = [tg.create_task(_normalize(raw_tx)) for raw_tx in tx_list.txs]

    results = [task.result() for task in tasks]
    docs = [tx for tx, ok in results if ok][:page_size]

    page = TxPage(docs=docs)
    page.sort()
    return page
