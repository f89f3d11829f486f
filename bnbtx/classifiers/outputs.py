from __future__ import annotations

from bnbtx.models.binance import ZERO_COIN, Coin, InputOutput


def pick_output_coin(outputs: list[InputOutput], address: str) -> Coin:
    """Coin sent to ``address`` by a multisend.

    Every output is scanned and the last one for ``address`` wins. Outputs without
    coins are ignored. No match gives a zero coin instead of an error.
    """
    coin = ZERO_COIN
    for out in outputs:
        if out.address == address and out.coins:
            coin = out.coins[0]
    return coin
