"""Client configuration.

The credential is resolved into an explicit ``ClientConfig`` that is passed
to the dispatcher, instead of being read from global state on every request.
``ClientConfig.from_env`` is the only place that touches the environment.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, SecretStr, field_validator

from .errors import ConfigurationError

API_BASE_URL = "https://api.openai.com"
API_VERSION = "v1"
API_KEY_ENV_VAR = "OPENAI_API_KEY"
BASE_URL_ENV_VAR = "OPENAI_BASE_URL"
TIMEOUT_ENV_VAR = "OPENAI_TIMEOUT"


class ClientConfig(BaseModel):
    """Connection settings for the API.

    ``timeout`` of None keeps the HTTP client's own default.
    """

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    base_url: str = API_BASE_URL
    api_version: str = API_VERSION
    timeout: float | None = None

    @field_validator("api_key")
    @classmethod
    def reject_blank_key(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("api_key must not be empty")
        return v

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> ClientConfig:
        """Build a config from the process environment.

        A ``.env`` file (``env_file``, or the nearest one found from the
        working directory) is loaded first without overriding variables that
        are already set.

        Raises:
            ConfigurationError: If OPENAI_API_KEY is missing or blank, or
                OPENAI_TIMEOUT is not a number.
        """
        load_dotenv(env_file or find_dotenv(usecwd=True), override=False)

        api_key = os.environ.get(API_KEY_ENV_VAR, "").strip()
        if not api_key:
            raise ConfigurationError(
                f"Missing API key: set {API_KEY_ENV_VAR} in the environment or a .env file",
                variable=API_KEY_ENV_VAR,
            )

        timeout: float | None = None
        raw_timeout = os.environ.get(TIMEOUT_ENV_VAR)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"{TIMEOUT_ENV_VAR} must be a number of seconds, got {raw_timeout!r}",
                    variable=TIMEOUT_ENV_VAR,
                ) from None

        return cls(
            api_key=SecretStr(api_key),
            base_url=os.environ.get(BASE_URL_ENV_VAR) or API_BASE_URL,
            timeout=timeout,
        )

    def url(self, path: str) -> str:
        """Absolute URL for an endpoint path such as ``/completions``."""
        return f"{self.base_url.rstrip('/')}/{self.api_version}/{path.lstrip('/')}"

    def headers(self, json_body: bool = False) -> dict[str, str]:
        """Request headers; Content-Type is only sent with a JSON body."""
        headers = {"Authorization": f"Bearer {self.api_key.get_secret_value()}"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers
