"""전역 설정 모듈."""

from .config import CONFIG, DashboardConfig, FirebaseSettings, load_firebase_settings

__all__ = ["CONFIG", "DashboardConfig", "FirebaseSettings", "load_firebase_settings"]
