import pytest

from app.core.config import ClientDeletePolicy
from app.core.exceptions import (
    ConflictError, NotFoundError, ReferenceNotFoundError, ValidationError
)
from app.models.client import Client
from app.models.contract import Contract
from app.schemas.client_schema import ClientUpdate, ClientWithContractCreate
from app.schemas.contract_schema import ContractDraft, ContractUpdate
from app.schemas.financial_schema import RevenueUpdate
from app.services.client_service import ClientService
from app.services.relationship_service import reconcile

from conftest import (
    assert_consistent, contract_payload, make_client_data, make_contract_data, make_revenue_data
)


def test_create_contract_caches_client_name_and_appends_id(store, clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    first = contracts.create_contract(make_contract_data(acme.id, title="A"))
    second = contracts.create_contract(make_contract_data(acme.id, title="B"))

    assert first.client_name == "Acme"
    assert clients.get_client(acme.id).contract_ids == [first.id, second.id]
    assert_consistent(store)


def test_create_contract_with_unknown_client_fails_and_changes_nothing(store, clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    before = acme.model_copy(deep=True)

    with pytest.raises(ReferenceNotFoundError):
        contracts.create_contract(make_contract_data("CLI-MISSING"))

    assert contracts.list_contracts() == []
    assert clients.get_client(acme.id) == before


def test_rename_client_updates_only_its_contracts(store, clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    other = clients.create_client(make_client_data("Globex"))
    a = contracts.create_contract(make_contract_data(acme.id))
    b = contracts.create_contract(make_contract_data(acme.id))
    c = contracts.create_contract(make_contract_data(other.id))

    clients.update_client(acme.id, ClientUpdate(company_name="Acme Corp"))

    assert contracts.get_contract(a.id).client_name == "Acme Corp"
    assert contracts.get_contract(b.id).client_name == "Acme Corp"
    assert contracts.get_contract(c.id).client_name == "Globex"
    assert_consistent(store)


def test_update_client_without_rename_keeps_contract_ids(clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    a = contracts.create_contract(make_contract_data(acme.id))

    updated = clients.update_client(acme.id, ClientUpdate(phone="123"))

    assert updated.phone == "123"
    assert updated.contract_ids == [a.id]


def test_move_contract_between_clients(store, clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    globex = clients.create_client(make_client_data("Globex"))
    a = contracts.create_contract(make_contract_data(acme.id))
    b = contracts.create_contract(make_contract_data(acme.id))

    moved = contracts.update_contract(a.id, ContractUpdate(client_id=globex.id))

    assert moved.client_name == "Globex"
    assert clients.get_client(acme.id).contract_ids == [b.id]
    assert clients.get_client(globex.id).contract_ids == [a.id]
    assert_consistent(store)


def test_move_contract_to_unknown_client_is_rejected(store, clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    a = contracts.create_contract(make_contract_data(acme.id))

    with pytest.raises(ReferenceNotFoundError):
        contracts.update_contract(a.id, ContractUpdate(client_id="CLI-MISSING", title="changed"))

    contract = contracts.get_contract(a.id)
    assert contract.client_id == acme.id
    assert contract.title == "Suporte ERP"
    assert_consistent(store)


def test_delete_contract_keeps_order_of_remaining_ids(store, clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    ids = [contracts.create_contract(make_contract_data(acme.id)).id for _ in range(3)]

    contracts.delete_contract(ids[1])

    assert clients.get_client(acme.id).contract_ids == [ids[0], ids[2]]
    assert_consistent(store)


def test_delete_unknown_contract_raises_not_found(contracts):
    with pytest.raises(NotFoundError):
        contracts.delete_contract("CTR-MISSING")


def test_delete_client_reject_policy(store, clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    contracts.create_contract(make_contract_data(acme.id))

    with pytest.raises(ConflictError):
        clients.delete_client(acme.id)

    assert clients.get_client(acme.id).company_name == "Acme"
    assert len(contracts.list_contracts()) == 1
    assert_consistent(store)


def test_delete_client_without_contracts_is_allowed(clients):
    acme = clients.create_client(make_client_data("Acme"))
    clients.delete_client(acme.id)
    with pytest.raises(NotFoundError):
        clients.get_client(acme.id)


def test_delete_client_cascade_policy(store, contracts):
    service = ClientService(store, delete_policy=ClientDeletePolicy.cascade)
    acme = service.create_client(make_client_data("Acme"))
    globex = service.create_client(make_client_data("Globex"))
    contracts.create_contract(make_contract_data(acme.id))
    kept = contracts.create_contract(make_contract_data(globex.id))

    service.delete_client(acme.id)

    assert [c.id for c in contracts.list_contracts()] == [kept.id]
    assert_consistent(store)


def test_delete_client_orphan_policy(store, contracts):
    service = ClientService(store, delete_policy=ClientDeletePolicy.orphan)
    acme = service.create_client(make_client_data("Acme"))
    a = contracts.create_contract(make_contract_data(acme.id))

    service.delete_client(acme.id)

    orphan = contracts.get_contract(a.id)
    assert orphan.client_id is None
    assert orphan.client_name is None

    # 解除關聯的合約仍可重新指派給其他客戶
    globex = service.create_client(make_client_data("Globex"))
    contracts.update_contract(a.id, ContractUpdate(client_id=globex.id))
    assert service.get_client(globex.id).contract_ids == [a.id]
    assert_consistent(store)


def test_monthly_contract_requires_monthly_value(store, clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))

    with pytest.raises(ValidationError):
        contracts.create_contract(make_contract_data(acme.id, payment_method="Monthly"))

    assert clients.get_client(acme.id).contract_ids == []
    assert contracts.list_contracts() == []


def test_non_monthly_contract_rejects_monthly_value(clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    with pytest.raises(ValidationError):
        contracts.create_contract(make_contract_data(acme.id, monthly_value=100))


def test_switching_away_from_monthly_clears_monthly_value(clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    a = contracts.create_contract(
        make_contract_data(acme.id, payment_method="Monthly", monthly_value=100)
    )

    updated = contracts.update_contract(a.id, ContractUpdate(payment_method="Installments"))

    assert updated.monthly_value is None


def test_start_date_after_end_date_is_rejected(clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    a = contracts.create_contract(make_contract_data(acme.id))

    with pytest.raises(ValidationError):
        contracts.update_contract(a.id, ContractUpdate(end_date="2023-01-01"))

    assert str(contracts.get_contract(a.id).end_date) == "2024-12-31"


def test_new_contracts_default_to_negotiating(clients, contracts):
    acme = clients.create_client(make_client_data("Acme"))
    a = contracts.create_contract(make_contract_data(acme.id))
    assert a.status.value == "Negotiating"


def test_create_client_with_contract_is_atomic(store, clients):
    draft = contract_payload("ignored", payment_method="Monthly")
    draft.pop("client_id")
    data = ClientWithContractCreate(
        client=make_client_data("Acme"),
        contract=ContractDraft(**draft)
    )

    with pytest.raises(ValidationError):
        clients.create_client_with_contract(data)

    assert clients.list_clients() == []
    assert store.collection("contracts") == {}

    draft["monthly_value"] = 100
    client, contract = clients.create_client_with_contract(
        ClientWithContractCreate(client=make_client_data("Acme"), contract=ContractDraft(**draft))
    )
    assert client.contract_ids == [contract.id]
    assert contract.client_name == "Acme"
    assert client.status.value == "Active"


def test_random_mutation_sequence_keeps_invariants(store, clients, contracts):
    a = clients.create_client(make_client_data("A"))
    b = clients.create_client(make_client_data("B"))
    c1 = contracts.create_contract(make_contract_data(a.id))
    c2 = contracts.create_contract(make_contract_data(b.id))
    c3 = contracts.create_contract(make_contract_data(a.id))
    clients.update_client(a.id, ClientUpdate(company_name="A2"))
    contracts.update_contract(c3.id, ContractUpdate(client_id=b.id))
    clients.update_client(b.id, ClientUpdate(company_name="B2"))
    contracts.delete_contract(c2.id)
    contracts.update_contract(c1.id, ContractUpdate(client_id=b.id))

    assert_consistent(store)
    assert clients.get_client(a.id).contract_ids == []
    assert clients.get_client(b.id).contract_ids == [c3.id, c1.id]


def _client(client_id, name, contract_ids=()):
    return Client(
        id=client_id, company_name=name, contact_name="x", email="x@x.com",
        type="Private", tax_id="1",
        address={"street": "s", "city": "c", "state": "st", "zip_code": "z"},
        contract_ids=list(contract_ids)
    )


def _contract(contract_id, client_id, client_name="stale"):
    return Contract(
        id=contract_id, client_id=client_id, client_name=client_name, title="t",
        start_date="2024-01-01", end_date="2024-02-01", manager="m",
        annual_value=0, payment_method="OneTime", hiring_type="Private",
        responsible_contact={"name": "n", "email": "n@x.com"}
    )


def test_reconcile_drops_foreign_ids_and_refreshes_names():
    client = _client("K1", "Acme", contract_ids=["T2", "GONE", "T1", "T2"])
    contracts = [_contract("T1", "K1"), _contract("T2", "K1"), _contract("T3", "K9"), _contract("T4", "K1")]

    owned = reconcile(client, contracts)

    assert client.contract_ids == ["T2", "T1", "T4"]
    assert [c.id for c in owned] == ["T1", "T2", "T4"]
    assert all(c.client_name == "Acme" for c in owned)
    assert contracts[2].client_name == "stale"


# --- 收款紀錄 ---

def test_revenue_takes_client_name_and_follows_rename(store, clients, contracts, financial):
    acme = clients.create_client(make_client_data("Acme"))
    contract = contracts.create_contract(make_contract_data(acme.id))
    revenue = financial.create_revenue(make_revenue_data(acme.id, contract.id))
    assert revenue.id.startswith("REC-")
    assert revenue.client_name == "Acme"

    clients.update_client(acme.id, ClientUpdate(company_name="Acme Corp"))

    assert financial.get_revenue(revenue.id).client_name == "Acme Corp"
    assert_consistent(store)


def test_revenue_with_unknown_client_or_contract_is_rejected(store, clients, contracts, financial):
    acme = clients.create_client(make_client_data("Acme"))
    contract = contracts.create_contract(make_contract_data(acme.id))

    with pytest.raises(ReferenceNotFoundError):
        financial.create_revenue(make_revenue_data("CLI-MISSING", contract.id))
    with pytest.raises(ReferenceNotFoundError):
        financial.create_revenue(make_revenue_data(acme.id, "CTR-MISSING"))

    assert financial.list_revenues() == []


def test_revenue_contract_must_belong_to_client(clients, contracts, financial):
    acme = clients.create_client(make_client_data("Acme"))
    globex = clients.create_client(make_client_data("Globex"))
    contract = contracts.create_contract(make_contract_data(globex.id))

    with pytest.raises(ValidationError):
        financial.create_revenue(make_revenue_data(acme.id, contract.id))


def test_revenue_update_to_unknown_contract_changes_nothing(clients, contracts, financial):
    acme = clients.create_client(make_client_data("Acme"))
    contract = contracts.create_contract(make_contract_data(acme.id))
    revenue = financial.create_revenue(make_revenue_data(acme.id, contract.id))

    with pytest.raises(ReferenceNotFoundError):
        financial.update_revenue(revenue.id, RevenueUpdate(contract_id="CTR-MISSING", value=999))

    unchanged = financial.get_revenue(revenue.id)
    assert unchanged.contract_id == contract.id
    assert unchanged.value == 100


def test_deleting_contract_detaches_its_revenues(store, clients, contracts, financial):
    acme = clients.create_client(make_client_data("Acme"))
    contract = contracts.create_contract(make_contract_data(acme.id))
    revenue = financial.create_revenue(make_revenue_data(acme.id, contract.id))

    contracts.delete_contract(contract.id)

    detached = financial.get_revenue(revenue.id)
    assert detached.contract_id is None
    assert detached.client_name == "Acme"
    assert_consistent(store)


def test_client_with_only_revenues_cannot_be_deleted_under_reject(clients, contracts, financial):
    acme = clients.create_client(make_client_data("Acme"))
    contract = contracts.create_contract(make_contract_data(acme.id))
    financial.create_revenue(make_revenue_data(acme.id, contract.id))
    contracts.delete_contract(contract.id)

    with pytest.raises(ConflictError):
        clients.delete_client(acme.id)
    assert len(financial.list_revenues()) == 1


def test_client_delete_policies_apply_to_revenues(store, contracts, financial):
    cascade = ClientService(store, delete_policy=ClientDeletePolicy.cascade)
    acme = cascade.create_client(make_client_data("Acme"))
    contract = contracts.create_contract(make_contract_data(acme.id))
    financial.create_revenue(make_revenue_data(acme.id, contract.id))
    cascade.delete_client(acme.id)
    assert financial.list_revenues() == []

    orphan = ClientService(store, delete_policy=ClientDeletePolicy.orphan)
    globex = orphan.create_client(make_client_data("Globex"))
    contract = contracts.create_contract(make_contract_data(globex.id))
    revenue = financial.create_revenue(make_revenue_data(globex.id, contract.id))
    orphan.delete_client(globex.id)

    detached = financial.get_revenue(revenue.id)
    assert detached.client_id is None
    assert detached.client_name is None
    assert detached.contract_id == contract.id
    assert_consistent(store)
