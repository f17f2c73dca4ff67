from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    google_maps_api_key: str = ""
    log_level: str = "INFO"
    http_timeout: float = 30.0
    max_enrich_leads: int = 20
    enrichment_timeout: float = 120.0
    enrichment_delay: float = 0.5
