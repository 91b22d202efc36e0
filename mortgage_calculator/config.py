from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Bank of England interactive database (IADB)
    boe_base_url: str = "https://www.bankofengland.co.uk/boeapps/iadb/fromshowcolumns.asp"
    boe_series_code: str = "IUMABEDR"  # Official Bank Rate
    boe_timeout_seconds: float = 15.0

    # Used whenever the BoE feed is unavailable or unparseable
    default_interest_rate: float = 5.25

    # Longest term accepted at the API and CLI boundaries
    max_term_years: int = 100

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
