"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"

# Catalog credentials keep the names the deployment environment already exports.
API_ENV_VARS = {
    "api_url": "DXHUB_KB_API_URL",
    "api_key": "DXHUB_KB_API_KEY",
}


class PublishConfig(BaseModel):
    """Everything the catalog client needs; built once at startup."""
    api_url: str
    api_key: str
    catalog: str = "CNCF Cloud Native Glossary"
    timeout: Optional[float] = None

    @property
    def endpoint(self) -> str:
        return f"{self.api_url.rstrip('/')}/api/patterns"


class Settings(BaseModel):
    app_name:     str = "kbpub"
    search_path:  str = Field(default="content/en/*.md", description="Glob of markdown files, relative to cwd")
    output_file:  str = Field(default="patterns.json",   description="JSON snapshot written after extraction")
    content_root: str = Field(default="content",         description="Root that link base URLs are relative to")
    repo_root:    str = Field(default=".",               description="Root that url/srcUrl templates are matched against")
    site_url:     str = Field(default="https://glossary.cncf.io/", description="Public base for rewritten links")
    api_url:      Optional[str] = Field(default=None, description="Catalog service base URL")
    api_key:      Optional[str] = Field(default=None, description="Static x-api-key credential")
    catalog:      str = Field(default="CNCF Cloud Native Glossary", description="Catalog label sent with each record")
    timeout:      Optional[float] = Field(default=None, gt=0, description="HTTP timeout in seconds; None waits forever")
    log_level:    str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")

    def publish_config(self) -> PublishConfig:
        """Return the publisher config, or raise ValueError if credentials are missing."""
        missing = [API_ENV_VARS[k] for k in ("api_url", "api_key") if not getattr(self, k)]
        if missing:
            raise ValueError(f"Missing catalog configuration: set {', '.join(missing)}")
        return PublishConfig(
            api_url=self.api_url,
            api_key=self.api_key,
            catalog=self.catalog,
            timeout=self.timeout,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then env vars, then non-None CLI overrides.

    Every field reads KBPUB_<FIELD>; api_url and api_key also read their
    DXHUB_KB_* names, which win over the KBPUB_ spelling.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"KBPUB_{name.upper()}"):
            data[name] = val
    for name, var in API_ENV_VARS.items():
        if val := os.getenv(var):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
