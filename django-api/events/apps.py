from django.apps import AppConfig


class EventsConfig(AppConfig):
    """Configuration for the events app.

    ready() imports the signals module so cache invalidation receivers are
    connected at startup.
    """

    name = "events"

    def ready(self) -> None:
        from events import signals  # noqa: F401
