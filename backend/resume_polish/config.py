"""
Process configuration for the AI polish service.
Read once at startup from the environment (a local .env is honoured).
"""
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from .errors import ConfigMissing

REQUIRED_VARS = ("AI_API_BASE", "AI_API_KEY", "AI_MODEL")
DEFAULT_TIMEOUT = 60.0


class ServiceConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_base: str
    api_key: str
    model: str
    # seconds, applied to every outbound call
    timeout: float = DEFAULT_TIMEOUT

    @property
    def completions_url(self) -> str:
        return f"{self.api_base}/chat/completions"


def load_config(environ: Optional[Mapping[str, str]] = None) -> ServiceConfig:
    """Build a ServiceConfig or raise ConfigMissing naming every absent variable.

    Empty strings count as absent so a blank line in .env does not produce a
    half-configured service.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    missing = [name for name in REQUIRED_VARS if not (environ.get(name) or "").strip()]
    if missing:
        raise ConfigMissing(missing)

    timeout_raw = environ.get("AI_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
    except ValueError:
        raise ConfigMissing(["AI_TIMEOUT"], f"AI_TIMEOUT must be a number of seconds, got {timeout_raw!r}")

    return ServiceConfig(
        api_base=environ["AI_API_BASE"].strip().rstrip("/"),
        api_key=environ["AI_API_KEY"].strip(),
        model=environ["AI_MODEL"].strip(),
        timeout=timeout,
    )
