"""
Welcome notification sent once per successful sign-up.

Only the message is built here. Delivery logs the message; a mail transport
can be plugged in by overriding ``WelcomeNotifier.deliver``.
"""
import logging
from dataclasses import dataclass

from fastapi import BackgroundTasks

from app.core.config import settings
from app.models.user import User

logger = logging.getLogger(__name__)


@dataclass
class WelcomeMessage:
    to: str
    sender: str
    subject: str
    body: str


def build_welcome_message(user: User) -> WelcomeMessage:
    """Build the welcome message for a newly registered user."""
    body = (
        f"Hello {user.first_name},\n\n"
        f"Thanks for signing up for {settings.APP_NAME}! "
        f"You can sign in at any time with your email address: {user.email}\n"
    )
    return WelcomeMessage(
        to=user.email,
        sender=settings.MAIL_FROM,
        subject=settings.WELCOME_SUBJECT,
        body=body,
    )


class WelcomeNotifier:
    """Builds and delivers welcome messages immediately."""

    def notify(self, user: User) -> None:
        self.deliver(build_welcome_message(user))

    def deliver(self, message: WelcomeMessage) -> None:
        logger.info("Welcome message to %s: %s", message.to, message.subject)


class BackgroundWelcomeNotifier:
    """Schedules delivery to run after the response has been sent."""

    def __init__(self, background_tasks: BackgroundTasks, notifier: WelcomeNotifier):
        self.background_tasks = background_tasks
        self.notifier = notifier

    def notify(self, user: User) -> None:
        # Build now: the user instance is detached once the request session closes
        message = build_welcome_message(user)
        self.background_tasks.add_task(self.notifier.deliver, message)
