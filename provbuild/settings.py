import os
import shlex
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_REGISTRY_ROOT = os.path.join(
    'examples', '.terraform', 'providers', 'registry.terraform.io', 'ashleyjackson', 'instatus', '1.0.0')
DEFAULT_ARTIFACT = 'terraform-provider-instatus'
DEFAULT_COMPILER = 'go'


class Settings(BaseSettings):
    """Build settings read from PROVBUILD_* environment variables.

    PROVBUILD_GO may hold a full command line, it is split with shlex.
    PROVBUILD_CLI_CONFIG is optional; when unset or empty no CLI config is written.
    """

    model_config = SettingsConfigDict(
        env_prefix='PROVBUILD_',
        extra='ignore',
        case_sensitive=False,
    )

    registry_root: str = Field(default=DEFAULT_REGISTRY_ROOT, min_length=1)
    artifact: str = Field(default=DEFAULT_ARTIFACT, min_length=1)
    go: str = DEFAULT_COMPILER
    cli_config: Optional[str] = None

    @field_validator('cli_config', mode='before')
    @classmethod
    def empty_as_unset(cls, v):
        return v or None

    @property
    def compiler(self):
        return tuple(shlex.split(self.go)) or (DEFAULT_COMPILER,)
