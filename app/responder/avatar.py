"""
responder/avatar.py — Talk/idle signalling for the avatar front end.

The UI owns the 3D avatar and the speech synthesiser; the responder owns the
timing. Once a reply exists:
    on_start_talking(text) -> speak(text) -> on_stop_talking()
Stop is always signalled, even if speaking fails, so the avatar never gets
stuck mid-sentence. A broken hook is logged and ignored.
"""
from collections.abc import Callable
from dataclasses import dataclass

from app.observability.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AvatarHooks:
    on_start_talking: Callable[[str], None] | None = None
    on_stop_talking: Callable[[], None] | None = None
    speak: Callable[[str], None] | None = None


def _call(hook_name: str, hook, *args) -> None:
    if hook is None:
        return
    try:
        hook(*args)
    except Exception as e:
        logger.warning("avatar_hook_failed", extra={"hook": hook_name, "error": str(e)})


def deliver(text: str, hooks: AvatarHooks | None) -> None:
    """Drive the avatar through one spoken reply."""
    if hooks is None:
        return
    _call("on_start_talking", hooks.on_start_talking, text)
    try:
        _call("speak", hooks.speak, text)
    finally:
        _call("on_stop_talking", hooks.on_stop_talking)
