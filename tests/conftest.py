import os
import sys
from datetime import date

import pytest

# Ensure the project root is on sys.path for imports during tests
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import ClientDeletePolicy
from app.core.store import DataStore
from app.schemas.client_schema import ClientCreate
from app.schemas.contract_schema import ContractCreate
from app.schemas.financial_schema import RevenueCreate
from app.services.client_service import ClientService
from app.services.contract_service import ContractService
from app.services.financial_service import FinancialService


def make_client_data(company_name="Acme", **overrides):
    data = {
        "company_name": company_name,
        "contact_name": "Ana Silva",
        "email": "ana@acme.com",
        "phone": "(11) 90000-0000",
        "type": "Private",
        "tax_id": "12.345.678/0001-99",
        "address": {"street": "Rua A, 1", "city": "São Paulo", "state": "SP", "zip_code": "01000-000"},
    }
    data.update(overrides)
    return ClientCreate(**data)


def contract_payload(client_id, **overrides):
    data = {
        "client_id": client_id,
        "title": "Suporte ERP",
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 12, 31),
        "manager": "João Pereira",
        "annual_value": 1200,
        "payment_method": "OneTime",
        "hiring_type": "Private",
        "responsible_contact": {"name": "Ana Silva", "email": "ana@acme.com"},
    }
    data.update(overrides)
    return data


def make_contract_data(client_id, **overrides):
    return ContractCreate(**contract_payload(client_id, **overrides))


@pytest.fixture
def store():
    return DataStore()


@pytest.fixture
def clients(store):
    return ClientService(store, delete_policy=ClientDeletePolicy.reject)


@pytest.fixture
def contracts(store):
    return ContractService(store)


def assert_consistent(store):
    """client_name 快取與 contract_ids 必須和實際關聯一致"""
    client_items = store.collection("clients")
    contract_items = store.collection("contracts")
    for contract in contract_items.values():
        if contract.client_id is not None:
            assert contract.client_name == client_items[contract.client_id].company_name
    for client in client_items.values():
        owned = {c.id for c in contract_items.values() if c.client_id == client.id}
        assert set(client.contract_ids) == owned
        assert len(client.contract_ids) == len(owned)
    for revenue in store.collection("revenues").values():
        if revenue.client_id is not None:
            assert revenue.client_name == client_items[revenue.client_id].company_name


def make_revenue_data(client_id, contract_id, **overrides):
    data = {
        "client_id": client_id,
        "contract_id": contract_id,
        "description": "Suporte ERP - Jan",
        "value": 100,
        "due_date": date(2024, 1, 10),
        "payment_method": "Monthly",
    }
    data.update(overrides)
    return RevenueCreate(**data)


@pytest.fixture
def financial(store):
    return FinancialService(store)
