import os

def get_settings_module() -> str:
    # APP_ENV 환경 변수로 설정 모듈을 고른다 (기본값: development)
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
