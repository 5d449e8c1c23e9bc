"""Application settings and configuration.

This module defines all configuration options for the Stakeguard service.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every economic constant of the report lifecycle lives here so that a
    deployment can tune stakes and the voting window without code changes.
    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Stakeguard", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Bearer tokens are minted upstream; we only verify them
    secret_key: str = Field(default="stakeguard-dev-secret", alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Database configuration
    database_url: str = Field(default="sqlite:///./stakeguard.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Stake economics (amounts are in the ledger's smallest unit)
    min_stake_amount: int = Field(default=1_000_000, alias="MIN_STAKE_AMOUNT", ge=1)
    reporter_bonus: int = Field(default=500_000, alias="REPORTER_BONUS", ge=0)
    escrow_principal: str = Field(default="stakeguard.escrow", alias="ESCROW_PRINCIPAL")

    # Voting window, measured in block heights
    voting_period: int = Field(default=144, alias="VOTING_PERIOD", ge=1)

    # Reputation rules
    default_reputation: int = Field(default=100, alias="DEFAULT_REPUTATION", ge=0)
    moderator_threshold: int = Field(default=5_000_000, alias="MODERATOR_THRESHOLD", ge=0)
    reputation_penalty: int = Field(default=10, alias="REPUTATION_PENALTY", ge=0)
    reputation_reward: int = Field(default=5, alias="REPUTATION_REWARD", ge=0)

    # Input bounds
    max_reason_bytes: int = Field(default=100, alias="MAX_REASON_BYTES", ge=1)
    content_ref_bytes: int = Field(default=64, alias="CONTENT_REF_BYTES", ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations.
        """
        url = self.effective_database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url

    @property
    def moderation_parameters(self) -> dict[str, int]:
        """Return the public lifecycle constants as a convenience dictionary."""
        return {
            "min_stake_amount": self.min_stake_amount,
            "reporter_bonus": self.reporter_bonus,
            "voting_period": self.voting_period,
            "default_reputation": self.default_reputation,
            "moderator_threshold": self.moderator_threshold,
            "reputation_penalty": self.reputation_penalty,
            "reputation_reward": self.reputation_reward,
        }


settings = Settings()
