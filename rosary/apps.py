from django.apps import AppConfig


class RosaryConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'rosary'
    verbose_name = 'Rosary'
