from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Bookmarks"
    module_name: str = "bookmarks"

    # "local" keeps JSON documents under base_storage_dir, "remote" talks to a remoteStorage server
    storage_backend: str = "local"
    base_storage_dir: str = "./data"

    # remoteStorage
    storage_root: str = ""        # e.g. https://storage.example.com/storage/alice
    storage_token: str = ""       # OAuth bearer token
    request_timeout: int = 30


settings = Settings()
