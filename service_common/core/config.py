from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_OPERATION_FAILURE_MESSAGE = "Database operation failed"
DEFAULT_ERROR_MESSAGE_PLACEHOLDER = "No message available"


class Settings(BaseSettings):
    # Message carried by exceptions remapped at the data-access boundary
    db_operation_failure_message: str = Field(
        default=DEFAULT_DB_OPERATION_FAILURE_MESSAGE,
        alias="DB_OPERATION_FAILURE_MESSAGE",
    )

    # Used when a failure has no message of its own
    error_message_placeholder: str = Field(
        default=DEFAULT_ERROR_MESSAGE_PLACEHOLDER,
        alias="ERROR_MESSAGE_PLACEHOLDER",
    )

    @field_validator("db_operation_failure_message", mode="before")
    @classmethod
    def empty_failure_message_to_default(cls, v: str | None) -> str:
        """Convert empty strings to the default failure message."""
        if not v:
            return DEFAULT_DB_OPERATION_FAILURE_MESSAGE
        return v

    @field_validator("error_message_placeholder", mode="before")
    @classmethod
    def empty_placeholder_to_default(cls, v: str | None) -> str:
        """Convert empty strings to the default placeholder."""
        if not v:
            return DEFAULT_ERROR_MESSAGE_PLACEHOLDER
        return v

    # Environment only; the host service owns its .env file
    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
