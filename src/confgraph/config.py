"""
Configuration management for the conference GraphQL server
"""

from importlib import resources

from pydantic_settings import BaseSettings


def default_data_path() -> str:
    """Path of the dataset bundled with the package."""
    return str(resources.files("confgraph").joinpath("data", "conference.json"))


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Dataset
    data_path: str | None = None
    strict_references: bool = True

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 1337
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # Logging
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "CONFGRAPH_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_data_path() -> str:
    """Get the dataset path, falling back to the bundled dataset."""
    return settings.data_path or default_data_path()
