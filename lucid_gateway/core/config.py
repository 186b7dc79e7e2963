from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "lucid-gateway"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    API_PREFIX: str = "/api/v1"
    # Readiness dependency
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: str | None = None
    REDIS_SOCKET_TIMEOUT_SECONDS: float = 5.0
    # WhatsApp webhook handshake
    WHATSAPP_WEBHOOK_VERIFY_TOKEN: str = ""

    class Config:
        env_file = ".env"


settings = Settings()
