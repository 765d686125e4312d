import pytest

from app.core.seed import SAMPLE_CLIENTS, SAMPLE_PROVIDERS, SAMPLE_REVENUES, SAMPLE_SERVICES, seed_store
from app.core.store import DataStore
from app.models.client import Client
from app.repositories.client_repo import ClientRepository
from app.repositories.logbook_repo import LogEntryRepository
from app.schemas.logbook_schema import LogCommentCreate, LogEntryCreate
from app.services.logbook_service import LogbookService
from app.services.report_service import ReportService

from conftest import assert_consistent, make_client_data


def test_transaction_rolls_back_on_error(store, clients):
    acme = clients.create_client(make_client_data("Acme"))

    with pytest.raises(RuntimeError):
        with store.transaction():
            clients.get_client(acme.id).company_name = "Changed"
            store.collection("clients").pop(acme.id)
            raise RuntimeError("boom")

    assert clients.get_client(acme.id).company_name == "Acme"


def test_nested_transaction_rolls_back_to_outer_snapshot(store, clients):
    with pytest.raises(RuntimeError):
        with store.transaction():
            clients.create_client(make_client_data("Acme"))
            with store.transaction():
                clients.create_client(make_client_data("Globex"))
            raise RuntimeError("boom")

    assert clients.list_clients() == []


def test_repository_rejects_duplicate_ids(store):
    repo = ClientRepository(store)
    first = repo.create(Client(id=repo.new_id(), **make_client_data("Acme").model_dump(exclude_none=True)))

    with pytest.raises(ValueError):
        repo.create(first.model_copy())
    assert len(repo.list_all()) == 1


def test_seeded_store_is_consistent():
    store = DataStore()
    seed_store(store)

    assert len(store.collection("clients")) == len(SAMPLE_CLIENTS)
    assert len(store.collection("services")) == len(SAMPLE_SERVICES)
    assert len(store.collection("providers")) == len(SAMPLE_PROVIDERS)
    assert len(store.collection("revenues")) == len(SAMPLE_REVENUES)
    assert_consistent(store)

    report = ReportService(store).service_report()
    assert report["summary"]["most_profitable"] == "Varejo Global S.A."
    assert report["summary"]["completed_services"] == 1


def test_clear_empties_every_collection():
    store = DataStore()
    seed_store(store)
    store.clear()
    assert all(not store.collection(name) for name in ("clients", "contracts", "services"))


def test_comment_ids_come_from_the_log_entry_repository(store):
    logbook = LogbookService(store)
    author = {"id": "CON-001", "name": "Carlos Silva"}
    entry = logbook.add_entry(LogEntryCreate(author=author, text="primeiro"))
    logbook.add_comment(entry.id, LogCommentCreate(author=author, text="a"))
    logbook.add_comment(entry.id, LogCommentCreate(author=author, text="b"))

    ids = [c.id for c in logbook.get_entry(entry.id).comments]
    assert all(i.startswith("COMMENT-") for i in ids)
    assert len(set(ids)) == 2
    assert LogEntryRepository(store).new_comment_id() not in ids
