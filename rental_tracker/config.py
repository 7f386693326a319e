from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ─── Application ───────────────────────────────────────────────────────────
    APP_NAME:  str = "Vehicle Rental Tracker"
    LOG_LEVEL: str = "INFO"

    # ─── Storage ───────────────────────────────────────────────────────────────
    DATA_DIR:       Path = Path(".")
    VEHICLES_FILE:  str  = "vehicles.txt"
    CUSTOMERS_FILE: str  = "customers.txt"
    RECORDS_FILE:   str  = "rental_records.txt"
    FILE_ENCODING:  str  = "utf-8"

    @property
    def vehicles_path(self) -> Path:
        return self.DATA_DIR / self.VEHICLES_FILE

    @property
    def customers_path(self) -> Path:
        return self.DATA_DIR / self.CUSTOMERS_FILE

    @property
    def records_path(self) -> Path:
        return self.DATA_DIR / self.RECORDS_FILE

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


settings = Settings()
