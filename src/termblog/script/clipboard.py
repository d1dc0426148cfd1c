"""Clipboard feedback shared by the code-copy and copy-link buttons.

A successful write swaps the button label for a success string and
adds the ``copied`` class; after a fixed delay the label and class
revert.  A failed code copy shows a distinct failure label for the same
delay; a failed link copy raises an alert instead.
"""

from dataclasses import dataclass

from termblog.config import ScriptConfig


@dataclass(frozen=True, slots=True)
class LabelChange:
    label: str
    add_class: str | None = None
    remove_class: str | None = None


@dataclass(frozen=True, slots=True)
class Feedback:
    """What the button shows now, and what it reverts to after ``revert_after_ms``.

    ``alert`` is set instead of a label change when the failure is
    surfaced as a dialog.
    """

    immediate: LabelChange | None = None
    revert: LabelChange | None = None
    revert_after_ms: int = 0
    alert: str | None = None


class CopyFeedback:
    """Feedback rules for clipboard buttons, parameterized by ``ScriptConfig``."""

    __slots__ = ("_config",)

    def __init__(self, config: ScriptConfig | None = None) -> None:
        self._config = config or ScriptConfig()

    def code(self, succeeded: bool) -> Feedback:
        """Feedback for a ``.code-copy`` button."""
        cfg = self._config
        if succeeded:
            return Feedback(
                immediate=LabelChange(cfg.copied_label, add_class=cfg.copied_class),
                revert=LabelChange(cfg.copy_label, remove_class=cfg.copied_class),
                revert_after_ms=cfg.copy_feedback_ms,
            )
        return Feedback(
            immediate=LabelChange(cfg.failed_label),
            revert=LabelChange(cfg.copy_label),
            revert_after_ms=cfg.copy_feedback_ms,
        )

    def link(self, succeeded: bool, original_label: str) -> Feedback:
        """Feedback for a ``data-share="copy"`` button labelled *original_label*."""
        cfg = self._config
        if not succeeded:
            return Feedback(alert=cfg.link_copy_failed_message)
        return Feedback(
            immediate=LabelChange(cfg.copied_label, add_class=cfg.copied_class),
            revert=LabelChange(original_label, remove_class=cfg.copied_class),
            revert_after_ms=cfg.copy_feedback_ms,
        )
