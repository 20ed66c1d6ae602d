from django.apps import AppConfig


class DotCalendarConfig(AppConfig):
    name = "dotcalendar"
    verbose_name = "Dot calendar"
