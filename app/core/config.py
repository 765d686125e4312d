# app/core/config.py
# 應用程式設定 (例如日誌等級、客戶刪除策略、是否載入範例資料等)
import enum
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientDeletePolicy(str, enum.Enum):
    # 客戶仍持有合約時的刪除策略
    reject = "reject"    # 拒絕刪除 (預設)
    cascade = "cascade"  # 連帶刪除所有合約
    orphan = "orphan"    # 保留合約，但解除與客戶的關聯


class Settings(BaseSettings):
    # 應用程式名稱 (顯示於 API 文件)
    APP_NAME: str = "Consultancy Back-office"
    # 日誌等級
    LOG_LEVEL: str = "INFO"
    # 刪除客戶時的連帶處理策略
    CLIENT_DELETE_POLICY: ClientDeletePolicy = ClientDeletePolicy.reject
    # 啟動時是否載入範例資料
    SEED_ON_STARTUP: bool = True
    # 儀表板「即將到期」合約的天數範圍
    UPCOMING_DEADLINE_DAYS: int = 30
    # CORS 允許的來源
    CORS_ORIGINS: List[str] = ["*"]

    # 環境變數檔案
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# 建立設定實例
settings = Settings()
