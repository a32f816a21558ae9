"""Runtime configuration.

All settings come from environment variables so the service can be deployed
without a config file:

- PORT / HOST: listening address (default 0.0.0.0:3000)
- WOOFMOO_STATION_NAME: station call sign used for the live stream entry
- WOOFMOO_LIVESTREAM_URL / WOOFMOO_LOGO_URL
- WOOFMOO_ARCHIVE_PAGE_URL / WOOFMOO_ARCHIVE_FEED_URL / WOOFMOO_BASE_URL
- WOOFMOO_ARCHIVE_DESCRIPTION: description given to scraped archives
- WOOFMOO_AGE_LIMIT_DAYS (default 30)
- WOOFMOO_REFRESH_INTERVAL_SECONDS (default 3600)
- WOOFMOO_MAX_WORKERS (default 8)
- WOOFMOO_HTTP_TIMEOUT / WOOFMOO_USER_AGENT
- WOOFMOO_REFRESH_ENABLED (default true)
- LOG_LEVEL (default INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    station_name: str = "WFMU"
    livestream_url: str = "http://stream0.wfmu.org/freeform-128k"
    logo_url: str = "https://www.wfmu.org/images/wfmu_logo_94.gif"
    archive_page_url: str = "https://wfmu.org/recentarchives.php"
    archive_feed_url: str = "http://wfmu.org/archivefeed/mp3.xml"
    base_url: str = "http://wfmu.org"
    archive_description: str = "WFMU archive"
    age_limit_days: int = 30
    refresh_interval_seconds: float = 3600.0
    max_workers: int = 8
    http_timeout: float = 10.0
    user_agent: str = "WoofMoo/0.1"
    refresh_enabled: bool = True
    log_level: str = "INFO"
    # "play" is what the assistant platform sends for "ask woof moo to play"
    extra_livestream_aliases: Tuple[str, ...] = field(default=("play",))

    @property
    def age_limit(self) -> timedelta:
        return timedelta(days=self.age_limit_days)

    @property
    def livestream_keys(self) -> Tuple[str, ...]:
        return tuple(self.extra_livestream_aliases) + (self.station_name.lower(),)

    @property
    def http_headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent}

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str, default):
            value = env.get(name)
            return default if value is None or value == "" else value

        return cls(
            host=get("HOST", defaults.host),
            port=int(get("PORT", defaults.port)),
            station_name=get("WOOFMOO_STATION_NAME", defaults.station_name),
            livestream_url=get("WOOFMOO_LIVESTREAM_URL", defaults.livestream_url),
            logo_url=get("WOOFMOO_LOGO_URL", defaults.logo_url),
            archive_page_url=get("WOOFMOO_ARCHIVE_PAGE_URL", defaults.archive_page_url),
            archive_feed_url=get("WOOFMOO_ARCHIVE_FEED_URL", defaults.archive_feed_url),
            base_url=get("WOOFMOO_BASE_URL", defaults.base_url),
            archive_description=get("WOOFMOO_ARCHIVE_DESCRIPTION", defaults.archive_description),
            age_limit_days=int(get("WOOFMOO_AGE_LIMIT_DAYS", defaults.age_limit_days)),
            refresh_interval_seconds=float(get("WOOFMOO_REFRESH_INTERVAL_SECONDS", defaults.refresh_interval_seconds)),
            max_workers=max(1, int(get("WOOFMOO_MAX_WORKERS", defaults.max_workers))),
            http_timeout=float(get("WOOFMOO_HTTP_TIMEOUT", defaults.http_timeout)),
            user_agent=get("WOOFMOO_USER_AGENT", defaults.user_agent),
            refresh_enabled=_env_bool(env, "WOOFMOO_REFRESH_ENABLED", defaults.refresh_enabled),
            log_level=get("LOG_LEVEL", defaults.log_level).upper(),
        )


def _env_bool(env, name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


_settings_cache: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = Settings.from_env()
    return _settings_cache
