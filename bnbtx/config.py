from pydantic import BaseModel
from pydantic_settings import BaseSettings


class BinanceEndpoints(BaseModel):
    explorer_url: str
    rpc_url: str
    timeout: float
    rows: int

    model_config = {"frozen": True}


class Settings(BaseSettings):
    binance_api_url: str = "https://explorer.binance.org/api"
    binance_rpc_url: str = "https://dex.binance.org/api"
    request_timeout: float = 5.0
    explorer_rows: int = 25
    page_size: int = 25
    receipt_concurrency: int = 4
    request_deadline: float = 15.0

    def endpoints(self) -> BinanceEndpoints:
        return BinanceEndpoints(
            explorer_url=self.binance_api_url.rstrip("/"),
            rpc_url=self.binance_rpc_url.rstrip("/"),
            timeout=self.request_timeout,
            rows=self.explorer_rows,
        )

    model_config = {
        "env_prefix": "BNBTX_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "frozen": True,
    }


settings = Settings()
