"""应用运行配置。"""

from functools import lru_cache
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """团队文档服务共享配置。"""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TDOC_", extra="ignore")

    app_name: str = Field(default="Team Document Service", description="应用名称。")
    app_env: str = Field(default="dev", description="运行环境标识。")
    app_debug: bool = Field(default=False, description="是否开启调试模式。")
    api_prefix: str = Field(default="/api/v1", description="统一接口前缀。")
    log_level: str = Field(default="INFO", description="日志级别，例如 DEBUG/INFO/WARNING。")
    popular_tags_limit: int = Field(default=10, ge=1, le=100, description="热门标签默认返回条数。")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """规范化日志级别并确保是标准级别名。"""
        normalized = value.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return normalized

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, value: str) -> str:
        """接口前缀统一为以 / 开头且不以 / 结尾。"""
        stripped = value.strip().strip("/")
        return f"/{stripped}" if stripped else ""


@lru_cache
def get_settings() -> Settings:
    """返回缓存后的配置单例。"""
    return Settings()
