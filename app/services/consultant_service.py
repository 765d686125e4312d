# app/services/consultant_service.py
from typing import List
import logging

from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore
from app.models.consultant import Consultant, EmploymentTypeEnum
from app.schemas.consultant_schema import ConsultantCreate, ConsultantUpdate
from app.repositories.consultant_repo import ConsultantRepository

logger = logging.getLogger(__name__)


def validate_payment_details(consultant: Consultant) -> None:
    """
    固定制只能有月薪，按時制只能有時薪
    """
    details = consultant.payment_details
    if consultant.employment_type == EmploymentTypeEnum.fixed:
        if details.monthly_salary is None or details.hourly_rate is not None:
            raise ValidationError("固定制顧問必須 (且只能) 填寫月薪")
    else:
        if details.hourly_rate is None or details.monthly_salary is not None:
            raise ValidationError("按時計酬顧問必須 (且只能) 填寫時薪")
    for value in (details.monthly_salary, details.hourly_rate):
        if value is not None and value < 0:
            raise ValidationError("薪資不可為負數")


class ConsultantService:
    def __init__(self, store: DataStore):
        self.store = store
        self.repo = ConsultantRepository(store)

    def list_consultants(self) -> List[Consultant]:
        return self.repo.list_all()

    def get_consultant(self, consultant_id: str) -> Consultant:
        consultant = self.repo.get_by_id(consultant_id)
        if not consultant:
            raise NotFoundError("顧問", consultant_id)
        return consultant

    def create_consultant(self, data: ConsultantCreate) -> Consultant:
        consultant = Consultant(id=self.repo.new_id(), **data.model_dump())
        validate_payment_details(consultant)
        self.repo.create(consultant)
        logger.info(f"建立顧問 {consultant.id} ({consultant.full_name})")
        return consultant

    def update_consultant(self, consultant_id: str, data: ConsultantUpdate) -> Consultant:
        with self.store.transaction():
            consultant = self.get_consultant(consultant_id)
            update_data = data.model_dump(exclude_unset=True)
            if "employment_type" in update_data and "payment_details" not in update_data:
                if update_data["employment_type"] != consultant.employment_type:
                    raise ValidationError("變更聘用方式時必須一併提供新的薪資資料")
            for key, value in update_data.items():
                if value is not None:
                    setattr(consultant, key, value)
            validate_payment_details(consultant)
            self.repo.update(consultant)
        return consultant

    def delete_consultant(self, consultant_id: str) -> None:
        consultant = self.get_consultant(consultant_id)
        self.repo.delete(consultant)
        logger.info(f"刪除顧問 {consultant_id}")
