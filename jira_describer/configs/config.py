from dataclasses import dataclass
import os
import logging
import shlex
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.yml")


@dataclass
class Config:
    app_name: str
    debug: bool
    rich_logging: bool
    jira_base_url: str
    jira_token: str
    jira_timeout: Optional[float]
    ai_command: str
    ai_args: List[str]
    ai_timeout: float
    editor_command: str
    editor_timeout: float
    use_editor: bool
    sections_file: Optional[str] = None


def setup_logging(config: "Config", level: Optional[int] = None) -> None:
    """Configure logging from ``config`` unless ``level`` is given explicitly."""
    if level is None:
        level = logging.DEBUG if config.debug else logging.INFO
    fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if config.rich_logging:
        install_rich_traceback()
        logging.basicConfig(
            level=level,
            format=fmt,
            handlers=[RichHandler(rich_tracebacks=True)],
            force=True,
        )
    else:
        logging.basicConfig(level=level, format=fmt, force=True)
    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    # Suppress noisy debug output from the HTTP stack
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def load_config(path: str = None) -> Config:
    """Load configuration from YAML file and environment variables."""
    load_dotenv()
    path = path or DEFAULT_CONFIG_PATH
    logger.debug("Loading configuration from %s", path)

    data = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.debug("Loaded YAML configuration from %s", path)
    else:
        logger.warning("Config file %s not found; using defaults", path)

    def _env_str(name: str, default: str) -> str:
        val = os.getenv(name)
        if val is None:
            return str(data.get(name.lower(), default) or default)
        return val

    def _env_bool(name: str, default: bool) -> bool:
        val = os.getenv(name)
        if val is None:
            return bool(data.get(name.lower(), default))
        return val.lower() in {"1", "true", "yes", "on"}

    def _env_float(name: str, default: Optional[float]) -> Optional[float]:
        val = os.getenv(name)
        if val is None:
            val = data.get(name.lower(), default)
        if val is None or val == "":
            return default
        try:
            return float(val)
        except (TypeError, ValueError):
            logger.warning("Invalid number for %s: %r; using %s", name, val, default)
            return default

    def _env_list(name: str, default: List[str]) -> List[str]:
        val = os.getenv(name)
        if val is not None:
            return shlex.split(val)
        raw = data.get(name.lower(), default)
        if isinstance(raw, str):
            return shlex.split(raw)
        return [str(item) for item in raw or []]

    editor_default = os.getenv("VISUAL") or os.getenv("EDITOR") or "code --wait"
    return Config(
        app_name=_env_str("APP_NAME", "JiraDescriber"),
        debug=_env_bool("DEBUG", False),
        rich_logging=_env_bool("RICH_LOGGING", True),
        jira_base_url=_env_str("JIRA_BASE_URL", "https://jira.example.com").rstrip("/"),
        jira_token=os.getenv("JIRA_TOKEN", data.get("jira_token") or ""),
        jira_timeout=_env_float("JIRA_TIMEOUT", None),
        ai_command=_env_str("AI_COMMAND", "claude"),
        ai_args=_env_list("AI_ARGS", ["--print"]),
        ai_timeout=_env_float("AI_TIMEOUT", 60.0),
        editor_command=_env_str("EDITOR_COMMAND", editor_default),
        editor_timeout=_env_float("EDITOR_TIMEOUT", 300.0),
        use_editor=_env_bool("USE_EDITOR", True),
        sections_file=os.getenv("SECTIONS_FILE", data.get("sections_file")),
    )
