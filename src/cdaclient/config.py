import os
from collections.abc import Mapping
from typing import Any, Literal

import yaml
from pydantic import BaseModel

DEFAULT_SERVER = "cdn.contentful.com"
PREVIEW_SERVER = "preview.contentful.com"
ENV_PREFIX = "CDA_"


class ClientConfig(BaseModel):
    server: str = DEFAULT_SERVER
    preview_mode: bool = False
    secure: bool = True
    user_agent: str = "cdaclient-python"
    timeout: float = 30

    logging_format: Literal["text", "json"] = "text"

    @property
    def scheme(self) -> str:
        return "https" if self.secure else "http"

    @property
    def host(self) -> str:
        if self.preview_mode and self.server == DEFAULT_SERVER:
            return PREVIEW_SERVER
        return self.server

    @classmethod
    def values_from_env(cls, environ: Mapping[str, str] | None = None) -> dict[str, str]:
        """Raw ``CDA_<FIELD>`` values for the known fields, left for pydantic to coerce."""
        environ = os.environ if environ is None else environ
        names = {f"{ENV_PREFIX}{field.upper()}": field for field in cls.model_fields}
        return {names[var]: value for var, value in environ.items() if var in names}

    @classmethod
    def values_from_yaml(cls, yaml_string: str) -> dict[str, Any]:
        """Known, non-null fields of a YAML mapping. Unknown keys are dropped.

        Raises:
            ValueError: If the document is neither empty nor a mapping.
        """
        document = yaml.safe_load(yaml_string)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ValueError(f"config YAML must be a mapping, got {type(document).__name__}")
        return {k: v for k, v in document.items() if k in cls.model_fields and v is not None}

    @classmethod
    def load(cls, yaml_string: str | None = None) -> "ClientConfig":
        """Build a config from defaults, then YAML, then ``CDA_*`` environment variables."""
        values: dict[str, Any] = {}
        if yaml_string is not None:
            values.update(cls.values_from_yaml(yaml_string))
        values.update(cls.values_from_env())
        return cls.model_validate(values)
