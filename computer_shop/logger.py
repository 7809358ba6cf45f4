"""
Structured JSON logger for shop observability.

Outputs one JSON object per log line on stderr, keeping stdout free for
the customer-facing shop output. Timestamps are ISO-8601 UTC.
"""
import json
import sys
import time
from datetime import datetime, timezone

from computer_shop.config import CONFIG


class ShopLogger:
    """Structured logger that writes JSON lines to stderr."""

    def __init__(self, shop: str = "", stream=None, enabled: bool | None = None):
        self.shop = shop or CONFIG.shop_name
        self.stream = stream or sys.stderr
        self.enabled = CONFIG.log_enabled if enabled is None else enabled
        self._start = time.monotonic()

    def _emit(self, level: str, event: str, component: str = "", **fields):
        if not self.enabled:
            return
        record = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "event": event,
            "shop": self.shop,
            "elapsed_ms": int((time.monotonic() - self._start) * 1000),
        }
        if component:
            record["component"] = component
        record.update(fields)
        self.stream.write(json.dumps(record) + "\n")
        self.stream.flush()

    def info(self, event: str, component: str = "", **kw):
        self._emit("info", event, component, **kw)

    def warn(self, event: str, component: str = "", **kw):
        self._emit("warn", event, component, **kw)

    def error(self, event: str, component: str = "", **kw):
        self._emit("error", event, component, **kw)

    def catalog_listed(self, items: int):
        self.info("catalog.listed", "warehouse", items=items)

    def build_step(self, builder: str, step: str):
        self.info("build.step", "director", builder=builder, step=step)

    def order_start(self, variant: str):
        self.info("order.start", "facade", variant=variant)

    def order_done(self, variant: str, duration_ms: int):
        self.info("order.done", "facade", variant=variant, duration_ms=duration_ms)

    def order_invalid(self, variant: str, errors: list[str]):
        self.warn("order.invalid", "facade", variant=variant, errors=errors)

    def shop_error(self, command: str, error: Exception):
        self.error("shop.error", getattr(error, "component", ""), command=command,
                   error=str(error), error_type=type(error).__name__)
