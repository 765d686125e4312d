# app/services/report_service.py

from datetime import date
from typing import Dict, Optional

from app.core.config import settings
from app.core.store import DataStore
from app.repositories.contract_repo import ContractRepository
from app.repositories.service_repo import ServiceRepository
from app.utils.profitability import dashboard_metrics, generate_report


class ReportService:
    """
    以目前 DataStore 的內容產生報表 (唯讀)
    """
    def __init__(self, store: DataStore):
        self.store = store
        self.service_repo = ServiceRepository(store)
        self.contract_repo = ContractRepository(store)

    def service_report(self) -> Dict:
        return generate_report(
            self.service_repo.list_all(),
            self.contract_repo.list_all()
        )

    def dashboard(self, today: Optional[date] = None, horizon_days: Optional[int] = None) -> Dict:
        return dashboard_metrics(
            self.service_repo.list_all(),
            self.contract_repo.list_all(),
            today=today or date.today(),
            horizon_days=horizon_days or settings.UPCOMING_DEADLINE_DAYS
        )
