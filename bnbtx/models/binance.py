"""
Shapes returned by the Binance Chain explorer and RPC node.

Only the fields needed for classification are modelled; everything else in the
upstream payloads is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

TRANSFER = "TRANSFER"
NATIVE_DENOM = "BNB"


class RawTransaction(BaseModel):
    hash: str = Field(alias="txHash")
    value: str = "0"
    fee: str = Field(default="0", alias="txFee")
    asset: str = Field(default="", alias="txAsset")
    mapped_asset: str = Field(default="", alias="mappedTxAsset")
    type: str = Field(default="", alias="txType")
    timestamp: int = Field(default=0, alias="timeStamp")
    block_height: int = Field(default=0, alias="blockHeight")
    memo: str = ""
    from_addr: str = Field(default="", alias="fromAddr")
    to_addr: str = Field(default="", alias="toAddr")

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True, "frozen": True}

    @field_validator("value", "fee", mode="before")
    @classmethod
    def _null_amount(cls, v):
        return "0" if v is None else v

    @field_validator("asset", "mapped_asset", "type", "memo", "from_addr", "to_addr", mode="before")
    @classmethod
    def _null_string(cls, v):
        return "" if v is None else v


class TransactionList(BaseModel):
    total: int = Field(default=0, alias="txNums")
    txs: list[RawTransaction] = Field(alias="txArray")

    model_config = {"populate_by_name": True}

    @field_validator("txs", mode="before")
    @classmethod
    def _null_list(cls, v):
        return [] if v is None else v


class Coin(BaseModel):
    denom: str = ""
    amount: str = "0"

    model_config = {"coerce_numbers_to_str": True, "frozen": True}


ZERO_COIN = Coin()


class InputOutput(BaseModel):
    address: str = ""
    coins: list[Coin] = Field(default_factory=list)


class SendValue(BaseModel):
    inputs: list[InputOutput] = Field(default_factory=list)
    outputs: list[InputOutput] = Field(default_factory=list)


class ReceiptMessage(BaseModel):
    type: str = ""
    value: SendValue = Field(default_factory=SendValue)


class ReceiptTxValue(BaseModel):
    msg: list[ReceiptMessage] = Field(default_factory=list)
    memo: str = ""


class ReceiptTx(BaseModel):
    type: str = ""
    value: ReceiptTxValue = Field(default_factory=ReceiptTxValue)


class MultisendReceipt(BaseModel):
    hash: str = ""
    height: str = ""
    tx: ReceiptTx

    model_config = {"coerce_numbers_to_str": True}

    @property
    def messages(self) -> list[ReceiptMessage]:
        return self.tx.value.msg
