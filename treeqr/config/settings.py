from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    server_host: str = "0.0.0.0"
    server_port: int = 8080

    firebase_credentials_path: str = "firebase-credentials.json"
    firebase_database_url: str = "https://treeqrsystem-default-rtdb.firebaseio.com/"
    firebase_trees_path: str = "trees"
    firebase_timeout_seconds: int = 30
    store_unavailable_status: int = 503

    description_provider: str = "openrouter"
    description_api_key: str = ""
    description_model_name: str = "google/gemma-3-4b-it:free"
    description_base_url: str | None = None
    description_timeout_seconds: int = 30

    tts_base_url: str = "http://localhost:5002"
    tts_timeout_seconds: int = 30
    tts_chunk_size: int = 8192
