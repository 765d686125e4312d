# app/utils/profitability.py
# 服務損益計算 (純函式，不依賴 DataStore)
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from app.models.contract import Contract, ContractStatusEnum
from app.models.service import Service, ServiceCosts, ServiceStatusEnum

# 沒有任何服務時，摘要中的名稱欄位使用此值
NO_DATA = "N/A"

COST_CATEGORIES = ("travel", "accommodation", "food", "transport")


def _find_contract(service: Service, contracts: Sequence[Contract]) -> Optional[Contract]:
    # 以顯示名稱 (client_name) 對應，取第一份符合的合約
    # 客戶改名後，舊服務的 client_name 就會對不上
    for contract in contracts:
        if contract.client_name == service.client_name:
            return contract
    return None


def total_costs(service: Service) -> float:
    costs = service.costs or ServiceCosts()
    return sum(getattr(costs, name, 0) or 0 for name in COST_CATEGORIES)


def calculate_service_performance(
    services: Sequence[Service],
    contracts: Sequence[Contract]
) -> List[Dict]:
    """
    計算每一筆服務的營收、成本、利潤與利潤率 (保持服務的原始順序)
    """
    rows = []
    for service in services:
        contract = _find_contract(service, contracts)
        revenue = contract.annual_value if contract else 0.0
        costs = total_costs(service)
        profit = revenue - costs
        profit_margin = (profit / revenue) * 100 if revenue > 0 else 0.0

        rows.append({
            "service_id": service.id,
            "client_name": service.client_name,
            "status": service.status.value,
            "contract_id": contract.id if contract else None,
            "revenue": revenue,
            "costs": costs,
            "profit": profit,
            "profit_margin": profit_margin,
        })
    return rows


def summarize_performance(rows: List[Dict], services: Sequence[Service]) -> Dict:
    """
    摘要：最賺 / 最不賺的服務 (同分取最先出現者)、總利潤、已完成數量
    """
    if not rows:
        return {
            "most_profitable": NO_DATA,
            "least_profitable": NO_DATA,
            "total_profit": 0.0,
            "completed_services": 0,
        }

    # max / min 在同分時回傳第一個遇到的元素
    most = max(rows, key=lambda r: r["profit"])
    least = min(rows, key=lambda r: r["profit"])
    completed = sum(1 for s in services if s.status == ServiceStatusEnum.completed)

    return {
        "most_profitable": most["client_name"],
        "least_profitable": least["client_name"],
        "total_profit": sum(r["profit"] for r in rows),
        "completed_services": completed,
    }


def generate_report(services: Sequence[Service], contracts: Sequence[Contract]) -> Dict:
    rows = calculate_service_performance(services, contracts)
    return {"rows": rows, "summary": summarize_performance(rows, services)}


def dashboard_metrics(
    services: Sequence[Service],
    contracts: Sequence[Contract],
    today: date,
    horizon_days: int = 30
) -> Dict:
    """
    儀表板指標：應收、協商中金額、總支出、支出分類、即將到期的合約
    """
    receivable_statuses = (ContractStatusEnum.active, ContractStatusEnum.awaiting_signature)
    # 月付合約以月付金額計算 (金額為 0 也一樣)，其餘以年度金額計算
    receivables = sum(
        c.monthly_value if c.monthly_value is not None else c.annual_value
        for c in contracts if c.status in receivable_statuses
    )
    pending_negotiation = sum(
        c.annual_value for c in contracts
        if c.status == ContractStatusEnum.negotiating
    )

    by_category = []
    for name in COST_CATEGORIES:
        value = sum(getattr(s.costs, name, 0) or 0 for s in services if s.costs)
        if value > 0:
            by_category.append({"category": name, "value": value})

    horizon = today + timedelta(days=horizon_days)
    upcoming = sorted(
        (
            c for c in contracts
            if c.status == ContractStatusEnum.active and today <= c.end_date <= horizon
        ),
        key=lambda c: c.end_date
    )

    return {
        "reference_date": today,
        "receivables": receivables,
        "pending_negotiation": pending_negotiation,
        "total_expenses": sum(total_costs(s) for s in services),
        "expenses_by_category": by_category,
        "upcoming_deadlines": upcoming,
    }
