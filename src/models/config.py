"""Model with service configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

import constants


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class APIKeyHeaderConfiguration(ConfigurationBase):
    """API key header configuration.

    Names the HTTP header that carries the API key and the scheme that has to
    precede the key in that header, e.g. `Authorization: ApiKey <key>`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    header_name: str = Field(
        constants.DEFAULT_API_KEY_HEADER_NAME,
        min_length=1,
        title="Header name",
        description="HTTP header carrying the API key. Looked up case-insensitively.",
    )

    scheme: str = Field(
        constants.DEFAULT_API_KEY_SCHEME,
        min_length=1,
        title="Scheme",
        description="Scheme preceding the API key. Compared case-sensitively.",
    )

    @field_validator("scheme")
    @classmethod
    def check_scheme(cls, value: str) -> str:
        """Check that the scheme is a single word.

        The header value is split on spaces, so a scheme containing a space
        would never match.

        Raises:
            ValueError: If the scheme contains a space.
        """
        if " " in value:
            raise ValueError(f"Scheme must not contain spaces, got '{value}'")
        return value


class Configuration(ConfigurationBase):
    """Global service configuration."""

    name: str = Field(
        ...,
        title="Service name",
        description="Name of the service using the API key extraction.",
    )

    api_key_header: APIKeyHeaderConfiguration = Field(
        default_factory=APIKeyHeaderConfiguration,
        title="API key header configuration",
    )
