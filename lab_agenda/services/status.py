from __future__ import annotations

"""Status text -> display category.

Matching is case-insensitive and by substring, checked in this order:
success ("confirmado", "realizado"), danger ("cancelado"),
warning ("pendente", "aguardando"). Anything else is "default";
an empty status is "none".
"""

__all__ = [
    "STATUS_DANGER",
    "STATUS_DEFAULT",
    "STATUS_NONE",
    "STATUS_SUCCESS",
    "STATUS_WARNING",
    "classify_status",
]

STATUS_SUCCESS = "success"
STATUS_DANGER = "danger"
STATUS_WARNING = "warning"
STATUS_DEFAULT = "default"
STATUS_NONE = "none"

_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (STATUS_SUCCESS, ("confirmado", "realizado")),
    (STATUS_DANGER, ("cancelado",)),
    (STATUS_WARNING, ("pendente", "aguardando")),
)


def classify_status(status: str | None) -> str:
    if not status:
        return STATUS_NONE
    lowered = status.lower()
    for category, keywords in _RULES:
        if any(k in lowered for k in keywords):
            return category
    return STATUS_DEFAULT
