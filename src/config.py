from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Projection
    projection_years: int = 40

    # Report layout: milestone columns and breakdown chart sampling
    summary_years: list[int] = [1, 5, 10, 30]
    chart_interval_years: int = 5


settings = Settings()
