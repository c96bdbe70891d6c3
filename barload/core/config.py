from pydantic_settings import BaseSettings

from barload.core.units import RoundingMode, WeightUnit


class Settings(BaseSettings):
    APP_NAME: str = "Barbell Plate Loader API"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    CORS_ORIGINS: list[str] = ["*"]

    # Defaults for a load plan when the request leaves them out
    DEFAULT_UNIT: WeightUnit = WeightUnit.KG
    DEFAULT_ROUNDING: RoundingMode = RoundingMode.NEAREST
    DEFAULT_BAR_WEIGHT: float = 20
    DEFAULT_COLLAR_WEIGHT: float = 2.5

    class Config:
        env_file = ".env"


settings = Settings()
