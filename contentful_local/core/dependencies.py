from pathlib import Path
from typing import Optional
import os

from contentful_local.client import LocalClient
from contentful_local.domain.models import ClientConfig

DATA_ROOT_ENV_VAR = "CONTENTFUL_LOCAL_PATH"
SPACE_ENV_VAR = "CONTENTFUL_SPACE_ID"
RESOLVE_LINKS_ENV_VAR = "CONTENTFUL_RESOLVE_LINKS"

DEFAULT_SPACE = "cfexampleapi"
_REPO_ROOT = Path(__file__).resolve().parents[2]
_DEFAULT_DATA_DIR = _REPO_ROOT / "data"

_client: Optional[LocalClient] = None


def get_data_dir() -> Path:
    env_path = os.environ.get(DATA_ROOT_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return _DEFAULT_DATA_DIR


def get_space_id() -> str:
    return os.environ.get(SPACE_ENV_VAR) or DEFAULT_SPACE


def get_resolve_links_default() -> Optional[bool]:
    raw = (os.environ.get(RESOLVE_LINKS_ENV_VAR) or "").strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    return None


def get_client_config() -> ClientConfig:
    return ClientConfig(
        space=get_space_id(),
        local_path=get_data_dir(),
        resolve_links=get_resolve_links_default(),
    )


def get_client() -> LocalClient:
    global _client
    if _client is None:
        _client = LocalClient(get_client_config())
    return _client


def reset_client() -> None:
    """Forget the cached client so the next call re-reads the environment."""
    global _client
    _client = None
