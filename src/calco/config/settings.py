from dataclasses import dataclass
import os
from typing import Mapping, Optional
from dotenv import load_dotenv


load_dotenv()


def _parse_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    app_title: str = "Calco"
    web_mode: bool = False
    port: int = 8550
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            app_title=env.get("CALCO_APP_TITLE", "Calco"),
            web_mode=_parse_flag(env.get("CALCO_WEB", "0")),
            port=int(env.get("PORT", "8550")),
            log_level=env.get("CALCO_LOG_LEVEL", "INFO").upper(),
            log_file=env.get("CALCO_LOG_FILE") or None,
        )


settings = Settings.from_env()
