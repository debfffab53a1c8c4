# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Publisher — pushes the output directory to a static hosting branch.
Handles git failures without escalating them.
"""

import ghp_import

from triage_duty.core.logging import get_logger
from triage_duty.metrics.prometheus import PUBLISH_ATTEMPTS

logger = get_logger(__name__)


class Publisher:
    """Commits the dist directory to ``branch`` and pushes it to ``remote``."""

    def __init__(self, remote: str, branch: str, message: str) -> None:
        self._remote = remote
        self._branch = branch
        self._message = message

    def publish(self, directory: str) -> bool:
        """Publish ``directory``. Failures are logged but never raised."""
        try:
            ghp_import.ghp_import(
                directory,
                mesg=self._message,
                remote=self._remote,
                branch=self._branch,
                push=True,
                nojekyll=True,
            )
        except Exception as exc:
            PUBLISH_ATTEMPTS.labels(outcome="failure").inc()
            logger.error("There was an error during publishing: %s", exc)
            return False
        PUBLISH_ATTEMPTS.labels(outcome="success").inc()
        logger.info(
            "Publish successful: dir=%s, remote=%s, branch=%s",
            directory, self._remote, self._branch,
        )
        return True
