from pydantic import PrivateAttr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "American Mortgage Site API"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite+aiosqlite:///./mortgage_site.db"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Shared key for admin routes; empty disables the check (local dev only)
    admin_api_key: str = ""

    site_url: str = "https://dev.americanmtg.com"
    upload_dir: str = "./public/uploads"
    claims_upload_dir: str = "./private/claims"

    claim_window_days: int = 7
    max_claim_file_mb: int = 10
    max_media_file_mb: int = 50

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    _is_sqlite: bool = PrivateAttr(default=False)

    def model_post_init(self, __context: object) -> None:
        _scheme = self.database_url.split(":")[0].lower()
        object.__setattr__(self, "_is_sqlite", "sqlite" in _scheme)

    @property
    def is_sqlite(self) -> bool:
        return self._is_sqlite

    @property
    def max_claim_file_bytes(self) -> int:
        return self.max_claim_file_mb * 1024 * 1024

    @property
    def max_media_file_bytes(self) -> int:
        return self.max_media_file_mb * 1024 * 1024


settings = Settings()
