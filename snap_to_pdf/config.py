# config.py - browser launch settings, overridable from the environment
#
#   SNAP_TO_PDF_HEADLESS       run Chromium headless (default: 1)
#   SNAP_TO_PDF_NO_SANDBOX     pass --no-sandbox --disable-setuid-sandbox (default: 1)
#   SNAP_TO_PDF_BROWSER_ARGS   extra Chromium args, whitespace separated
#   SNAP_TO_PDF_EXECUTABLE     path to a Chromium binary (default: Playwright's)
#   SNAP_TO_PDF_TIMEOUT_MS     navigation / load timeout (default: 30000)

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .errors import InvalidConfigurationError

ENV_PREFIX = "SNAP_TO_PDF_"
SANDBOX_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]
DEFAULT_TIMEOUT_MS = 30_000

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidConfigurationError(f"{ENV_PREFIX}{name} must be a boolean flag, got {raw!r}")


@dataclass
class BrowserConfig:
    headless: bool = True
    no_sandbox: bool = True
    extra_args: List[str] = field(default_factory=list)
    executable_path: Optional[str] = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    @property
    def launch_args(self) -> List[str]:
        args = list(SANDBOX_ARGS) if self.no_sandbox else []
        return args + [a for a in self.extra_args if a not in args]

    def launch_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"headless": self.headless, "args": self.launch_args}
        if self.executable_path:
            kwargs["executable_path"] = self.executable_path
        return kwargs

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "BrowserConfig":
        env = os.environ if env is None else env

        timeout_raw = env.get(ENV_PREFIX + "TIMEOUT_MS")
        try:
            timeout_ms = int(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_MS
        except ValueError:
            raise InvalidConfigurationError(
                f"{ENV_PREFIX}TIMEOUT_MS must be an integer, got {timeout_raw!r}"
            ) from None

        return cls(
            headless=_env_flag(env, "HEADLESS", True),
            no_sandbox=_env_flag(env, "NO_SANDBOX", True),
            extra_args=shlex.split(env.get(ENV_PREFIX + "BROWSER_ARGS", "")),
            executable_path=env.get(ENV_PREFIX + "EXECUTABLE") or None,
            timeout_ms=timeout_ms,
        )
