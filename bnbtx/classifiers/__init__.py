from bnbtx.classifiers.binance_normalizer import BinanceNormalizer, ReceiptResolver
from bnbtx.classifiers.outputs import pick_output_coin

__all__ = ["BinanceNormalizer", "ReceiptResolver", "pick_output_coin"]
