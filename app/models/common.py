# app/models/common.py
# 多個實體共用的基底類別與值物件
from pydantic import BaseModel, ConfigDict


class EntityModel(BaseModel):
    # Service 層以 setattr 套用部分更新，指派時需重新驗證 (dict -> 巢狀 model)
    model_config = ConfigDict(validate_assignment=True)


class Address(BaseModel):
    street: str
    city: str
    state: str
    zip_code: str
