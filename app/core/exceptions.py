# app/core/exceptions.py
# 領域錯誤類型
# 全部繼承 HTTPException，Service 層直接拋出，FastAPI 會轉成 {"detail": ...} 回應
from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """操作的 ID 不存在於對應的資料集合"""
    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(status.HTTP_404_NOT_FOUND, f"{entity} 不存在: {entity_id}")


class ReferenceNotFoundError(HTTPException):
    """關聯的 ID 找不到對應實體 (合約的客戶、收款紀錄的客戶或合約)"""
    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            status.HTTP_400_BAD_REQUEST,
            f"關聯的 {entity} 不存在: {entity_id}"
        )


class ValidationError(HTTPException):
    """必填欄位缺漏，或違反領域限制 (例如月付合約缺少月付金額)"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(status.HTTP_400_BAD_REQUEST, message)


class ConflictError(HTTPException):
    """操作與目前資料狀態衝突 (例如刪除仍持有合約的客戶)"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(status.HTTP_409_CONFLICT, message)
