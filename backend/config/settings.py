"""Application configuration using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MONGODB_SCHEMES = ("mongodb://", "mongodb+srv://")


class Settings(BaseSettings):
    """Application settings loaded from environment variables with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(
        default="development",
        description="Environment: development, test, production"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    # CORS Settings
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins"
    )

    # Database Configuration
    mongodb_url: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string"
    )
    mongodb_database: str = Field(default="blog-app", description="Database name")
    test_mongodb_url: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string used by the integration suite"
    )
    test_mongodb_database: str = Field(
        default="test-blog-app",
        description="Database name used by the integration suite"
    )
    mongodb_timeout_ms: int = Field(
        default=5000,
        gt=0,
        description="Server selection timeout in milliseconds"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(
        default="",
        description="Logfire observability token"
    )

    @field_validator("mongodb_url", "test_mongodb_url")
    @classmethod
    def validate_mongodb_url(cls, v: str) -> str:
        """Validate that the connection string uses a MongoDB scheme."""
        if not v.startswith(MONGODB_SCHEMES):
            raise ValueError(
                f"MongoDB URL must start with one of {', '.join(MONGODB_SCHEMES)}"
            )
        return v

    @field_validator("mongodb_database", "test_mongodb_database")
    @classmethod
    def validate_database_name(cls, v: str) -> str:
        """Validate that the database name is provided."""
        if not v.strip():
            raise ValueError("Database name cannot be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names."""
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(VALID_LOG_LEVELS)}")
        return v_upper

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"

    def for_testing(self) -> "Settings":
        """
        Return a copy of these settings bound to the test store location.

        The production connection string and database are replaced by the
        test ones so a test run never touches production data.
        """
        return self.model_copy(
            update={
                "environment": "test",
                "mongodb_url": self.test_mongodb_url,
                "mongodb_database": self.test_mongodb_database,
            }
        )


# Create a singleton instance
settings = Settings()


def get_settings() -> Settings:
    """Return the singleton settings instance."""
    return settings
