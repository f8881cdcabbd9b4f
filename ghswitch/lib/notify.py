"""Desktop notifications for token switches. Delivery is best-effort."""

import logging
import subprocess
import sys

from ghswitch.errors import NotificationError
from ghswitch.models import NotificationConfig

logger = logging.getLogger(__name__)


def tty_attached() -> bool:
    return any(stream.isatty() for stream in (sys.stdin, sys.stdout, sys.stderr) if stream)


def should_notify(config: NotificationConfig, implicit_cycle: bool, tty_present: bool) -> bool:
    if not config.enabled:
        return False
    if config.only_on_implicit_cycle and not implicit_cycle:
        return False
    if config.only_when_no_tty and tty_present:
        return False
    return True


def _command(title: str, body: str) -> list[str] | None:
    if sys.platform == "darwin":
        esc_title = title.replace('"', '\\"')
        esc_body = body.replace('"', '\\"')
        script = f'display notification "{esc_body}" with title "{esc_title}"'
        return ["osascript", "-e", script]
    if sys.platform.startswith("linux"):
        return ["notify-send", title, body]
    return None


def send_notification(title: str, body: str) -> None:
    cmd = _command(title, body)
    if cmd is None:
        return

    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        raise NotificationError(f"failed to run {cmd[0]}: {e}") from e

    if result.returncode != 0:
        raise NotificationError(f"{cmd[0]} notification failed")


def maybe_notify(config: NotificationConfig, implicit_cycle: bool, title: str, body: str) -> None:
    if not should_notify(config, implicit_cycle, tty_attached()):
        return

    try:
        send_notification(title, body)
    except NotificationError as e:
        logger.debug(f"Notification not delivered: {e}")
