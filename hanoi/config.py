from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal
from hanoi.constants import DEFAULT_BENCH_DISKS

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Input rules and the dump default are fixed in hanoi.constants; only
# ambient behavior is tunable here.
class AppSettings(BaseSettings):
    log_level: LogLevel = "WARNING"
    model_config = SettingsConfigDict(env_prefix='HANOI_APP_')

class BenchSettings(BaseSettings):
    max_disks: int = Field(default=DEFAULT_BENCH_DISKS, ge=1)
    model_config = SettingsConfigDict(env_prefix='HANOI_BENCH_')

class Settings(BaseSettings):
    app: AppSettings = AppSettings()
    bench: BenchSettings = BenchSettings()

settings = Settings()
