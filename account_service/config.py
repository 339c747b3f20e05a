from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./data/accounts.sqlite3"
    bcrypt_rounds: int = 10
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 3000
    api_base_url: str = "http://localhost:3000"  # used by the client form

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
