"""Event logger: one line per named event, human text from the catalog."""

from __future__ import annotations

import logging
import os


class BotLogger:
    def __init__(self, name: str = "oxygen") -> None:
        self.logger = logging.getLogger(name)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        event_name = f"{domain}_{action}".lower()
        human_text = human
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import EVENT_TEMPLATES

            template = EVENT_TEMPLATES.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
        self._log(level, event_name, human_text, exc_info=exc_info, **kwargs)

    def _log(
        self,
        level: int,
        event_name: str,
        human_text: str,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        kw: dict[str, object] = dict(kwargs)
        prefix = self._build_prefix(kw.pop("nick", None), kw.pop("channel", None))
        if self._is_debug_enabled():
            msg = self._build_debug_message(event_name, prefix, human_text, kw)
        else:
            msg = f"{prefix} {human_text}"
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _is_debug_enabled() -> bool:
        return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")

    @staticmethod
    def _build_prefix(nick: object, channel: object) -> str:
        label = nick if isinstance(nick, str) and nick else "system"
        core = f"{label}@{channel}" if isinstance(channel, str) and channel else label
        return f"[{core.ljust(20)[:20]}]"

    @staticmethod
    def _build_debug_message(
        event_name: str,
        prefix: str,
        human_text: str,
        kwargs: dict[str, object],
    ) -> str:
        width = 28
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {prefix} {human_text}"
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        if context:
            base = f"{base} ({context})"
        return base


logger = BotLogger()
