from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    db_user: str
    db_password: str
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "lightbnb"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    log_level: str = "INFO"
