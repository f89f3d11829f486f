from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field

BNB_COIN = 714  # SLIP-44

TxType = Literal["transfer", "native_token_transfer", "token_transfer"]


class Transfer(BaseModel):
    value: str

    model_config = {"frozen": True}


class NativeTokenTransfer(BaseModel):
    name: str = ""
    symbol: str
    token_id: str
    decimals: int
    value: str
    from_: str = Field(serialization_alias="from")
    to: str

    model_config = {"frozen": True}


class TokenTransfer(BaseModel):
    name: str = ""
    symbol: str
    token_id: str = ""
    decimals: int
    value: str
    from_: str = Field(serialization_alias="from")
    to: str

    model_config = {"frozen": True}


class Tx(BaseModel):
    id: str
    coin: int = BNB_COIN
    from_: str = Field(default="", serialization_alias="from")
    to: str = ""
    fee: str = "0"
    date: int
    block: int = 0
    memo: str = ""
    meta: Transfer | NativeTokenTransfer | TokenTransfer

    model_config = {"frozen": True}

    @computed_field
    @property
    def type(self) -> TxType:
        if isinstance(self.meta, NativeTokenTransfer):
            return "native_token_transfer"
        if isinstance(self.meta, TokenTransfer):
            return "token_transfer"
        return "transfer"


class TxPage(BaseModel):
    docs: list[Tx] = Field(default_factory=list)

    @computed_field
    @property
    def total(self) -> int:
        return len(self.docs)

    def sort(self) -> None:
        """Newest first; ties keep upstream order."""
        self.docs.sort(key=lambda tx: tx.date, reverse=True)
