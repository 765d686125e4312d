# app/services/service_service.py
from typing import List
import logging

from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore
from app.models.service import Service
from app.schemas.service_schema import ServiceCreate, ServiceUpdate
from app.repositories.service_repo import ServiceRepository

logger = logging.getLogger(__name__)

# 可以被清空的欄位
NULLABLE_FIELDS = {"start_date", "end_date", "description", "work_plan", "final_report"}


def _check_dates(service: Service) -> None:
    if service.start_date and service.end_date and service.start_date > service.end_date:
        raise ValidationError("服務開始日期不可晚於結束日期")


class ServiceService:
    """
    服務 (顧問案) 的 CRUD
    與合約沒有外鍵關聯，報表才以 client_name 對應
    """
    def __init__(self, store: DataStore):
        self.store = store
        self.repo = ServiceRepository(store)

    def list_services(self) -> List[Service]:
        return self.repo.list_all()

    def get_service(self, service_id: str) -> Service:
        service = self.repo.get_by_id(service_id)
        if not service:
            raise NotFoundError("服務", service_id)
        return service

    def create_service(self, data: ServiceCreate) -> Service:
        service = Service(id=self.repo.new_id(), **data.model_dump())
        _check_dates(service)
        self.repo.create(service)
        logger.info(f"建立服務 {service.id} ({service.client_name})")
        return service

    def update_service(self, service_id: str, data: ServiceUpdate) -> Service:
        with self.store.transaction():
            service = self.get_service(service_id)
            update_data = data.model_dump(exclude_unset=True)
            for key, value in update_data.items():
                if value is None and key not in NULLABLE_FIELDS:
                    continue
                setattr(service, key, value)
            _check_dates(service)
            self.repo.update(service)
        return service

    def delete_service(self, service_id: str) -> None:
        service = self.get_service(service_id)
        self.repo.delete(service)
        logger.info(f"刪除服務 {service_id}")
