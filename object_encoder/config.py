from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Encoder function settings loaded from environment."""

    # Service
    service_name: str = "object-encoder"
    log_level: str = "INFO"

    # AWS
    aws_region: str = "us-west-2"
    ca_bundle_path: str = "/etc/pki/tls/certs/ca-bundle.crt"
    aws_endpoint_url: str | None = None  # For LocalStack, HTTPS only

    # Encoding
    read_chunk_size: int = 4096

    @field_validator("aws_endpoint_url", mode="after")
    @classmethod
    def require_https_endpoint(cls, v: str | None) -> str | None:
        """Security: The endpoint override must not downgrade to plaintext."""
        if v is not None and not v.lower().startswith("https://"):
            raise ValueError("aws_endpoint_url must use https://")
        return v

    class Config:
        env_prefix = "ENCODER_"
        env_file = ".env"
        case_sensitive = False


settings = Settings()
