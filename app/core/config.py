import os
import pathlib
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# 项目根目录 (config.py 在 app/core/)
BASE_DIR = pathlib.Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    # 应用基础配置
    APP_NAME: str = Field(default='Resource CRUD API', description='应用名称')
    APP_VERSION: str = Field(default='1.0.0', description='应用版本')
    ENVIRONMENT: Literal['development', 'staging', 'production'] = Field(default='development', description='运行环境')
    DEBUG: bool = Field(default=False, description='调试模式')

    # 服务器配置
    HOST: str = Field(default='0.0.0.0', description='服务器主机')
    PORT: int = Field(default=3031, description='服务器端口')
    CORS_ORIGIN: str = Field(default='*', description='允许的跨域来源, 逗号分隔')

    # 数据库配置 (SQLite 文件路径, 相对路径基于项目根目录)
    DATABASE_PATH: str = Field(default='./data/database.sqlite', description='SQLite 数据库文件')

    # url前缀
    API_PREFIX: str = Field(default='/api', description='API 路径前缀')

    # 日志配置
    LOG_LEVEL: str = Field(default='INFO', description='日志级别')
    LOG_DIR: str = Field(default='logs', description='日志目录')
    LOG_TO_FILE: bool = Field(default=True, description='是否写入日志文件')
    LOG_JSON_FORMAT: bool = Field(default=False, description='是否使用 JSON 日志格式')
    LOG_MAX_BYTES: int = Field(default=10 * 1024 * 1024, description='单个日志文件大小上限')
    LOG_BACKUP_COUNT: int = Field(default=5, description='日志文件保留数量')

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', case_sensitive=True, extra='ignore')

    @property
    def BASE_DIR(self) -> pathlib.Path:
        return BASE_DIR

    @property
    def is_development(self) -> bool:
        """是否为开发环境"""
        return self.ENVIRONMENT == 'development'

    @property
    def is_production(self) -> bool:
        """是否为生产环境"""
        return self.ENVIRONMENT == 'production'

    @property
    def database_file(self) -> pathlib.Path:
        path = pathlib.Path(self.DATABASE_PATH)
        if not path.is_absolute():
            path = BASE_DIR / path
        return path

    @property
    def database_url(self) -> str:
        """SQLAlchemy 连接URL (同时用于Alembic)"""
        return f"sqlite:///{self.database_file.as_posix()}"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGIN.split(',') if origin.strip()]


# 根据环境加载不同配置文件
def get_settings() -> Settings:
    env = os.getenv('ENVIRONMENT', 'development')

    env_file_map = {
        'development': BASE_DIR / '.env.dev',
        'staging': BASE_DIR / '.env.staging',
        'production': BASE_DIR / '.env.prod',
    }
    env_file = env_file_map.get(env, BASE_DIR / '.env')

    return Settings(_env_file=env_file)


# 全局配置实例
settings = get_settings()
