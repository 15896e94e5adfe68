from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = True
    log_dir: str = ""  # empty = backend/logs

    # Estimates
    currency: str = "INR"

    # CORS
    cors_origins: str = "https://enchanting-gumdrop-6882e1.netlify.app,http://localhost:3000"
    cors_methods: str = "POST,GET,OPTIONS"
    cors_headers: str = "Content-Type"

    @property
    def cors_origin_list(self) -> list[str]:
        return _split_csv(self.cors_origins)

    @property
    def cors_method_list(self) -> list[str]:
        return _split_csv(self.cors_methods)

    @property
    def cors_header_list(self) -> list[str]:
        return _split_csv(self.cors_headers)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


settings = Settings()
