from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "WARNING"
    debug: bool = False

    # Job-creation draft defaults applied to every smart import
    draft_status: str = "draft"
    draft_priority: str = "medium"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
