"""Where to send the user after a successful sign-in."""

from __future__ import annotations

import logging
from urllib.parse import unquote, urlsplit

from reclaim.auth.models import NavigationContext

logger = logging.getLogger(__name__)

DEFAULT_LANDING_PATH = "/dashboard"


def _is_local_path(path: str) -> bool:
    if not path.startswith("/") or path.startswith("//") or "\\" in path:
        return False
    parts = urlsplit(path)
    return not parts.scheme and not parts.netloc


def resolve(
    context: NavigationContext,
    default: str = DEFAULT_LANDING_PATH,
) -> str:
    """Return the decoded ``redirectTo`` target, or ``default``.

    An empty or blank ``redirectTo`` counts as absent. Targets that leave
    the site (absolute URLs, protocol-relative paths) are ignored.
    """
    redirect_to = context.redirect_to
    if not redirect_to or not redirect_to.strip():
        return default

    target = unquote(redirect_to)
    if not _is_local_path(target):
        logger.warning("Ignoring off-site redirectTo target: %r", target)
        return default

    return target
