import re

from bnbtx.errors import InvalidAddressError

# bech32: hrp "bnb" (mainnet) or "tbnb" (testnet), separator "1", 38 data+checksum chars
BNB_ADDRESS_RE = re.compile(r"^t?bnb1[02-9ac-hj-np-z]{38}$")


def validate_address(address: str) -> str:
    address = address.strip()
    if not BNB_ADDRESS_RE.match(address):
        raise InvalidAddressError(
            f"Invalid Binance Chain address '{address}'. Expected bech32 string starting with bnb1."
        )
    return address


def validate_token(token: str | None) -> str:
    return (token or "").strip()
