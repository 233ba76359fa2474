from django.apps import AppConfig


class CarriersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "domains.carriers"
    label = "carriers"

    directory = None

    def ready(self):
        # 프로세스 시작 시 1회 로드 → 이후 읽기 전용
        from django.conf import settings

        from .directory import CarrierDirectory

        self.directory = CarrierDirectory.load(settings.CARRIERS_FILE)


def get_directory():
    """시작 시 만들어 둔 CarrierDirectory 를 꺼낸다."""
    from django.apps import apps

    return apps.get_app_config("carriers").directory
