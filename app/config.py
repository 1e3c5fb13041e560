"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class SearchStrategy(str, Enum):
    """How multi-filter food search is evaluated"""

    SUBQUERY = "subquery"
    INTERSECTION = "intersection"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="Foodbase", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=4000, ge=1, le=65535, description="Server port")

    # Database settings
    database_url: str = Field(
        default="postgresql+psycopg2://user@localhost:5432/foodbase",
        description="SQLAlchemy database URL",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:4000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # Authentication
    jwt_secret: str = Field(
        default="dev-change-this-secret", description="Secret used to sign JWTs"
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    access_token_expire_minutes: int = Field(
        default=1440, ge=1, description="Access token lifetime in minutes"
    )
    bcrypt_rounds: int = Field(
        default=10, ge=4, le=31, description="bcrypt cost factor for password hashes"
    )

    # Pagination and search
    max_page_size: int = Field(default=100, ge=1, description="Largest allowed page")
    search_default_limit: int = Field(
        default=20, ge=0, description="Default advanced search result cap"
    )
    search_strategy: SearchStrategy = Field(
        default=SearchStrategy.SUBQUERY,
        description="Advanced search evaluation strategy",
    )

    # Foods created through the API are attached to this source
    user_source_name: str = Field(
        default="User contributed", description="Source name for user-created foods"
    )

    # GraphQL
    graphql_path: str = Field(default="/graphql", description="GraphQL endpoint path")
    graphiql_enabled: bool = Field(default=True, description="Serve GraphiQL IDE")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("search_strategy", mode="before")
    @classmethod
    def validate_search_strategy(cls, v):
        if isinstance(v, str):
            return SearchStrategy(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Default settings instance used by the uvicorn entry point
settings = Settings()
