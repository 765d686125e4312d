import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.seed import seed_store
from app.core.store import DataStore
from app.routers import (
    client_router, contract_router, consultant_router,
    service_router, logbook_router, report_router,
    provider_router, financial_router
)


# 設定基礎日誌
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__) # 建立一個 logger 實例


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 每個行程建立一個 DataStore，結束時釋放
    store = DataStore()
    if settings.SEED_ON_STARTUP:
        seed_store(store)
    app.state.store = store
    logger.info(f"{settings.APP_NAME} 啟動 (刪除客戶策略: {settings.CLIENT_DELETE_POLICY.value})")
    yield
    store.clear()
    logger.info(f"{settings.APP_NAME} 關閉")


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# --- 設定 CORS (跨來源資源共用) ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"], # 允許所有 HTTP 方法
    allow_headers=["*"], # 允許所有 HTTP 標頭
)

# --- 根路徑 ---
@app.get("/")
def read_root():
    return {"status": "success", "message": "Backend is running!"}

# --- 載入 API 路由 ---
app.include_router(client_router.router)
app.include_router(contract_router.router)
app.include_router(consultant_router.router)
app.include_router(service_router.router)
app.include_router(logbook_router.router)
app.include_router(provider_router.router)
app.include_router(financial_router.router)
app.include_router(report_router.router)
