from bnbtx.config import BinanceEndpoints
from bnbtx.errors import SourceConnectionError
from bnbtx.models.binance import MultisendReceipt, RawTransaction

ADDRESS = "bnb1d4u8amvqx3rm6022gnuhp7nq0tuj7fm4yt4azn"
OTHER = "bnb1c4lqcngks8fceqa6tmm2laqkeykx9ahje72er9"
THIRD = "bnb1fjrzr02vkcx2ne7vgn0p2whwy523yhqd88s2qr"

MULTISEND_HASH = "F756A40911AC12732A8B2463F57FDC0E49B689D76BF7C53BA8B7A5CC8E5307F4"

TEST_ENDPOINTS = BinanceEndpoints(
    explorer_url="https://explorer.test/api",
    rpc_url="https://rpc.test/api",
    timeout=1.0,
    rows=25,
)


# --- Mock explorer responses ---

MOCK_BNB_TRANSFER = {
    "txHash": "4B2C00CCDDF0DD13A75C288CCB706A06EAA6743A45ED2B3DA2A9BD852CB08D0C",
    "blockHeight": 378788621,
    "txType": "TRANSFER",
    "timeStamp": 1722171431626,
    "fromAddr": ADDRESS,
    "toAddr": OTHER,
    "value": "100000000",
    "txAsset": "BNB",
    "mappedTxAsset": "BNB",
    "txFee": "37500",
    "memo": "",
}

MOCK_TOKEN_TRANSFER = {
    "txHash": "402646BA0BC060586EA5B638BCE96D7D3C7BCCC9F86581D293DEE24C377C3964",
    "blockHeight": 378788314,
    "txType": "TRANSFER",
    "timeStamp": 1722170909426,
    "fromAddr": OTHER,
    "toAddr": ADDRESS,
    "value": "250000000",
    "txAsset": "TWT-8C2",
    "mappedTxAsset": "TWT",
    "txFee": "37500",
    "memo": "2184198175716975",
}

MOCK_MULTISEND = {
    "txHash": MULTISEND_HASH,
    "blockHeight": 378788245,
    "txType": "TRANSFER",
    "timeStamp": 1722170793316,
    "fromAddr": None,
    "toAddr": None,
    "value": "300000000",
    "txAsset": "",
    "mappedTxAsset": "",
    "txFee": "60000",
    "memo": "",
}

MOCK_CANCEL_ORDER = {
    "txHash": "AA8CD4363BA72753BF935AFF0602E88CB2768829C5BA7B0016625A23BA965C2C",
    "blockHeight": 378787842,
    "txType": "CANCEL_ORDER",
    "timeStamp": 1722170107030,
    "fromAddr": ADDRESS,
    "toAddr": "",
    "value": "0",
    "txAsset": "BNB",
    "mappedTxAsset": "BNB",
    "txFee": "0",
    "memo": "",
}

MOCK_TX_LIST = {
    "txNums": 4,
    "txArray": [MOCK_TOKEN_TRANSFER, MOCK_BNB_TRANSFER, MOCK_CANCEL_ORDER, MOCK_MULTISEND],
}


def multisend_receipt_json(inputs: list, outputs: list, tx_hash: str = MULTISEND_HASH) -> dict:
    return {
        "code": 0,
        "hash": tx_hash,
        "height": "378788245",
        "ok": True,
        "tx": {
            "type": "auth/StdTx",
            "value": {
                "memo": "",
                "msg": [
                    {
                        "type": "cosmos-sdk/Send",
                        "value": {"inputs": inputs, "outputs": outputs},
                    }
                ],
            },
        },
    }


# ADDRESS sends 3 BNB split between OTHER and THIRD
MOCK_MULTISEND_RECEIPT = multisend_receipt_json(
    inputs=[{"address": ADDRESS, "coins": [{"denom": "BNB", "amount": 300000000}]}],
    outputs=[
        {"address": OTHER, "coins": [{"denom": "BNB", "amount": 100000000}]},
        {"address": THIRD, "coins": [{"denom": "BNB", "amount": 200000000}]},
    ],
)


def make_raw_tx(base: dict = MOCK_BNB_TRANSFER, **overrides) -> RawTransaction:
    return RawTransaction.model_validate({**base, **overrides})


class FakeResolver:
    """In-memory receipt source; unknown hashes fail like a dropped connection."""

    def __init__(self, receipts: dict | None = None):
        self.receipts = receipts or {}
        self.calls: list[str] = []

    async def get_receipt(self, tx_hash: str) -> MultisendReceipt:
        self.calls.append(tx_hash)
        if tx_hash not in self.receipts:
            raise SourceConnectionError()
        return MultisendReceipt.model_validate(self.receipts[tx_hash])
