# dietplan/services/notifier.py
import logging
from typing import List

from dietplan.models.meal import Notification

logger = logging.getLogger(__name__)


class Notifier:
    """Collects user-visible notifications raised while handling one request."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def notify(self, title: str, description: str, variant: str = "default") -> Notification:
        notification = Notification(title=title, description=description, variant=variant)
        self.notifications.append(notification)
        logger.debug("Notification queued: %s", title)
        return notification

    def info(self, title: str, description: str) -> Notification:
        return self.notify(title, description)

    def warning(self, title: str, description: str) -> Notification:
        return self.notify(title, description, variant="destructive")

    def warnings(self) -> List[Notification]:
        return [n for n in self.notifications if n.variant == "destructive"]
