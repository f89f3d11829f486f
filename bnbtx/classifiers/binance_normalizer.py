"""
Binance Chain transaction normalizer.

Maps one explorer record onto the canonical Tx model. Rules are tried in order
and the first whose predicate matches decides the outcome:

1. native BNB transfer (no token filter)
2. native token transfer for the requested token
3. multisend, where the explorer leaves from/to blank and the receipt is
   fetched to rebuild them

Anything else is rejected. A rejection is not an error, the caller just drops
the record.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Protocol

from bnbtx.classifiers.amounts import BINANCE_DECIMALS, decimal_exp
from bnbtx.classifiers.outputs import pick_output_coin
from bnbtx.errors import BinanceError
from bnbtx.models.binance import (
    NATIVE_DENOM,
    TRANSFER,
    MultisendReceipt,
    RawTransaction,
    SendValue,
)
from bnbtx.models.tx import NativeTokenTransfer, TokenTransfer, Transfer, Tx

logger = logging.getLogger(__name__)


class ReceiptResolver(Protocol):
    async def get_receipt(self, tx_hash: str) -> MultisendReceipt:
        ...


Predicate = Callable[[RawTransaction, str], bool]
Builder = Callable[[RawTransaction, str], Awaitable["Tx | None"]]


def is_native_transfer(raw_tx: RawTransaction, token: str) -> bool:
    return raw_tx.asset == NATIVE_DENOM and raw_tx.type == TRANSFER and token == ""


def is_native_token_transfer(raw_tx: RawTransaction, token: str) -> bool:
    return raw_tx.asset != "" and raw_tx.asset == token and raw_tx.type == TRANSFER


def is_multisend(raw_tx: RawTransaction, token: str) -> bool:
    return (raw_tx.from_addr == "" or raw_tx.to_addr == "") and raw_tx.type == TRANSFER


def _first_send(receipt: MultisendReceipt) -> SendValue | None:
    # Only the first message and its first input are read; check they exist.
    if not receipt.messages:
        return None
    send = receipt.messages[0].value
    if not send.inputs or not send.outputs or not send.inputs[0].coins:
        return None
    return send


def _base_fields(raw_tx: RawTransaction) -> dict:
    return {
        "id": raw_tx.hash,
        "fee": decimal_exp(raw_tx.fee),
        "date": raw_tx.timestamp // 1000,
        "block": raw_tx.block_height,
        "memo": raw_tx.memo,
    }


class BinanceNormalizer:
    def __init__(self, resolver: ReceiptResolver):
        self._resolver = resolver
        self._rules: tuple[tuple[str, Predicate, Builder], ...] = (
            ("native_transfer", is_native_transfer, self._native_transfer),
            ("native_token_transfer", is_native_token_transfer, self._native_token_transfer),
            ("multisend", is_multisend, self._multisend),
        )

    async def normalize(
        self, raw_tx: RawTransaction, token: str, address: str
    ) -> tuple[Tx | None, bool]:
        for rule, matches, build in self._rules:
            if not matches(raw_tx, token):
                continue
            try:
                tx = await build(raw_tx, address)
            except ValueError as exc:
                logger.warning("Rejecting %s (%s): %s", raw_tx.hash, rule, exc)
                return None, False
            return tx, tx is not None

        logger.debug("Unclassified tx %s type=%s asset=%s", raw_tx.hash, raw_tx.type, raw_tx.asset)
        return None, False

    async def _native_transfer(self, raw_tx: RawTransaction, address: str) -> Tx:
        return Tx(
            **_base_fields(raw_tx),
            from_=raw_tx.from_addr,
            to=raw_tx.to_addr,
            meta=Transfer(value=decimal_exp(raw_tx.value)),
        )

    async def _native_token_transfer(self, raw_tx: RawTransaction, address: str) -> Tx:
        return Tx(
            **_base_fields(raw_tx),
            from_=raw_tx.from_addr,
            to=raw_tx.to_addr,
            meta=NativeTokenTransfer(
                token_id=raw_tx.asset,
                symbol=raw_tx.mapped_asset,
                value=decimal_exp(raw_tx.value),
                decimals=BINANCE_DECIMALS,
                from_=raw_tx.from_addr,
                to=raw_tx.to_addr,
            ),
        )

    async def _multisend(self, raw_tx: RawTransaction, address: str) -> Tx | None:
        try:
            receipt = await self._resolver.get_receipt(raw_tx.hash)
        except BinanceError as exc:
            logger.warning("Receipt lookup failed for %s, skipping: %s", raw_tx.hash, exc)
            return None

        send = _first_send(receipt)
        if send is None:
            logger.warning("Receipt for %s has no usable input/output, skipping", raw_tx.hash)
            return None

        first_input = send.inputs[0]
        input_coin = first_input.coins[0]
        # outputs[0] stands in for the counterparty when there are several recipients
        counterparty = send.outputs[0].address

        if first_input.address == address:
            sender, recipient, coin = address, counterparty, input_coin
        else:
            sender, recipient = counterparty, address
            coin = pick_output_coin(send.outputs, address)

        value = decimal_exp(coin.amount)
        if input_coin.denom == NATIVE_DENOM:
            meta = Transfer(value=value)
        else:
            meta = TokenTransfer(
                symbol=input_coin.denom,
                decimals=BINANCE_DECIMALS,
                value=value,
                from_=sender,
                to=recipient,
            )

        return Tx(**_base_fields(raw_tx), from_=sender, to=recipient, meta=meta)
