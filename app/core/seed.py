# app/core/seed.py
# 範例資料：透過 Service 層寫入，確保 client_name / contract_ids 一致
import logging
from datetime import date

from app.core.store import DataStore
from app.schemas.client_schema import ClientCreate, ClientWithContractCreate
from app.schemas.consultant_schema import ConsultantCreate
from app.schemas.contract_schema import ContractDraft
from app.schemas.financial_schema import RevenueCreate
from app.schemas.logbook_schema import AnnouncementCreate, LogCommentCreate, LogEntryCreate
from app.schemas.provider_schema import ProviderCreate
from app.schemas.service_schema import ServiceCreate
from app.services.client_service import ClientService
from app.services.consultant_service import ConsultantService
from app.services.financial_service import FinancialService
from app.services.logbook_service import LogbookService
from app.services.provider_service import ProviderService
from app.services.service_service import ServiceService

logger = logging.getLogger(__name__)

SAMPLE_CLIENTS = [
    {
        "client": {
            "company_name": "Tech Solutions Ltda.",
            "contact_name": "Ana Silva",
            "email": "ana.silva@techsolutions.com",
            "phone": "(11) 91111-2222",
            "type": "Private",
            "tax_id": "12.345.678/0001-99",
            "registration_date": date(2023, 11, 20),
            "address": {"street": "Av. Paulista, 1000", "city": "São Paulo", "state": "SP", "zip_code": "01310-100"},
        },
        "contract": {
            "title": "Contrato de Suporte e Manutenção ERP",
            "start_date": date(2024, 1, 1),
            "end_date": date(2024, 12, 31),
            "status": "Active",
            "manager": "João Pereira",
            "annual_value": 60000,
            "payment_method": "Monthly",
            "monthly_value": 5000,
            "hiring_type": "Private",
            "services_description": "Suporte técnico contínuo para o sistema ERP.",
            "responsible_contact": {"name": "Ana Silva", "email": "ana.silva@techsolutions.com", "whatsapp": "(11) 91111-2222"},
        },
    },
    {
        "client": {
            "company_name": "Secretaria de Educação Municipal",
            "contact_name": "Roberto Campos",
            "email": "roberto.campos@sem.gov.br",
            "phone": "(21) 2233-4455",
            "type": "Public",
            "tax_id": "98.765.432/0001-11",
            "registration_date": date(2024, 2, 10),
            "address": {"street": "Rua da Assembleia, 10", "city": "Rio de Janeiro", "state": "RJ", "zip_code": "20011-000"},
        },
        "contract": {
            "title": "Consultoria para Implementação de Plataforma EAD",
            "start_date": date(2024, 3, 1),
            "end_date": date(2024, 9, 30),
            "status": "AwaitingSignature",
            "manager": "Mariana Lima",
            "annual_value": 120000,
            "payment_method": "Installments",
            "hiring_type": "PublicBid",
            "services_description": "Planejamento e execução da plataforma de ensino a distância.",
            "responsible_contact": {"name": "Roberto Campos", "email": "roberto.campos@sem.gov.br", "phone": "(21) 2233-4455"},
        },
    },
    {
        "client": {
            "company_name": "Varejo Global S.A.",
            "contact_name": "Carla Dias",
            "email": "carla.dias@varejoglobal.com",
            "phone": "",
            "type": "Private",
            "tax_id": "11.222.333/0001-44",
            "registration_date": date(2024, 7, 5),
            "address": {"street": "Rua das Flores, 500", "city": "Curitiba", "state": "PR", "zip_code": "80010-000"},
        },
        "contract": {
            "title": "Implementação de Novo Sistema de Vendas",
            "start_date": date(2024, 8, 15),
            "end_date": date(2025, 2, 15),
            "manager": "João Pereira",
            "annual_value": 250000,
            "payment_method": "OneTime",
            "hiring_type": "Private",
            "services_description": "Novo sistema de ponto de venda (PDV) para todas as lojas.",
            "responsible_contact": {"name": "Carla Dias", "email": "carla.dias@varejoglobal.com"},
        },
    },
]

SAMPLE_CONSULTANTS = [
    {
        "full_name": "Carlos Silva",
        "tax_id": "123.456.789-00",
        "address": {"street": "Rua das Palmeiras, 123", "city": "São Paulo", "state": "SP", "zip_code": "01530-010"},
        "education": "Mestrado em Administração Pública",
        "specialty": "Licitações e Contratos Governamentais",
        "contact": {"email": "carlos.silva@consultoria.com", "whatsapp": "(11) 99999-1111"},
        "bank_details": {"bank": "Banco do Brasil", "agency": "0001", "account": "12345-6", "pix": "123.456.789-00"},
        "employment_type": "Fixed",
        "payment_details": {"monthly_salary": 8500.00},
        "contract_type": "Contract",
    },
    {
        "full_name": "Beatriz Lima",
        "tax_id": "987.654.321-99",
        "address": {"street": "Avenida Copacabana, 456", "city": "Rio de Janeiro", "state": "RJ", "zip_code": "22020-001"},
        "education": "MBA em Gestão de Projetos",
        "specialty": "Gestão de Projetos de TI",
        "contact": {"email": "beatriz.lima@consultoria.com", "whatsapp": "(21) 98888-2222"},
        "bank_details": {"bank": "Itaú", "agency": "1234", "account": "56789-0", "pix": "beatriz.lima@consultoria.com"},
        "employment_type": "OnDemand",
        "payment_details": {"hourly_rate": 150.00},
        "contract_type": "Other",
    },
]

SAMPLE_SERVICES = [
    {
        "client_name": "Tech Solutions Ltda.",
        "project_manager": "Ana Costa",
        "status": "InProgress",
        "start_date": date(2024, 8, 1),
        "end_date": date(2024, 9, 15),
        "type": "OnSite",
        "description": "Implementação de sistema ERP completo.",
        "consultants": ["Carlos Silva", "Beatriz Lima"],
        "costs": {"travel": 1200.50, "accommodation": 3500.00, "food": 850.75, "transport": 300.00},
        "work_plan": {"status": "Approved", "content": "Levantamento, configuração, customização e go-live."},
    },
    {
        "client_name": "Inova Marketing Digital",
        "project_manager": "Pedro Martins",
        "status": "Completed",
        "start_date": date(2024, 7, 10),
        "end_date": date(2024, 7, 30),
        "type": "Online",
        "description": "Consultoria de SEO e análise de concorrência.",
        "consultants": ["Carlos Silva"],
    },
    {
        "client_name": "Varejo Global S.A.",
        "project_manager": "Pedro Martins",
        "status": "Pending",
        "start_date": date(2024, 9, 1),
        "end_date": date(2024, 12, 20),
        "type": "Hybrid",
        "description": "Treinamento das equipes de loja no novo PDV.",
        "consultants": ["Beatriz Lima"],
        "costs": {"travel": 800.00, "food": 200.00},
    },
]


SAMPLE_PROVIDERS = [
    {
        "company_name": "Alfa Treinamentos Corporativos Ltda.",
        "cnpj": "11.222.333/0001-45",
        "address": {"street": "Rua das Inovações, 789", "city": "Campinas", "state": "SP", "zip_code": "13083-852"},
        "contact": {"name": "Fernanda Oliveira", "email": "contato@alfatreinamentos.com", "phone": "(19) 3344-5566"},
        "offered_services": [
            {"name": "Treinamento de Liderança", "billing_type": "Fixed", "value": 15000,
             "professionals": ["Ricardo Mendes", "Sofia Bernardes"]},
            {"name": "Workshop de Vendas", "billing_type": "Fixed", "value": 8000,
             "professionals": ["Ricardo Mendes"]},
        ],
        "professionals": ["Ricardo Mendes", "Sofia Bernardes"],
    },
]

# 依 SAMPLE_CLIENTS 的索引對應客戶與其第一份合約
SAMPLE_REVENUES = [
    (0, {"description": "Contrato de Suporte ERP - Jan/25", "value": 5000, "due_date": date(2025, 1, 10),
         "payment_date": date(2025, 1, 8), "status": "Received", "payment_method": "Monthly"}),
    (1, {"description": "Plataforma EAD - Parcela 1/3", "value": 40000, "due_date": date(2025, 3, 15),
         "status": "Pending", "payment_method": "Installments"}),
    (0, {"description": "Contrato de Suporte ERP - Fev/25", "value": 5000, "due_date": date(2025, 2, 10),
         "status": "Overdue", "payment_method": "Monthly"}),
]


def seed_store(store: DataStore) -> None:
    """
    將範例資料載入一個空的 DataStore
    """
    clients = ClientService(store)
    created = []
    for sample in SAMPLE_CLIENTS:
        created.append(clients.create_client_with_contract(ClientWithContractCreate(
            client=ClientCreate(**sample["client"]),
            contract=ContractDraft(**sample["contract"])
        )))

    financial = FinancialService(store)
    for index, sample in SAMPLE_REVENUES:
        client, contract = created[index]
        financial.create_revenue(RevenueCreate(client_id=client.id, contract_id=contract.id, **sample))

    consultants = ConsultantService(store)
    for sample in SAMPLE_CONSULTANTS:
        consultants.create_consultant(ConsultantCreate(**sample))

    providers = ProviderService(store)
    for sample in SAMPLE_PROVIDERS:
        providers.create_provider(ProviderCreate(**sample))

    services = ServiceService(store)
    for sample in SAMPLE_SERVICES:
        services.create_service(ServiceCreate(**sample))

    logbook = LogbookService(store)
    logbook.add_announcement(AnnouncementCreate(
        title="Reunião Geral da Equipe na Sexta-feira",
        text="A reunião trimestral será nesta sexta-feira às 10:00.",
        author="Admin"
    ))
    author = {"id": "CON-001", "name": "Carlos Silva", "avatar_url": ""}
    entry = logbook.add_entry(LogEntryCreate(
        author=author,
        text="Iniciei a revisão da proposta para a Tech Solutions Ltda."
    ))
    logbook.add_comment(entry.id, LogCommentCreate(
        author={"id": "ADMIN", "name": "Admin", "avatar_url": ""},
        text="Ótimo, aguardo a primeira versão."
    ))

    logger.info(
        f"載入範例資料: {len(SAMPLE_CLIENTS)} 個客戶, "
        f"{len(SAMPLE_CONSULTANTS)} 位顧問, {len(SAMPLE_PROVIDERS)} 家供應商, "
        f"{len(SAMPLE_SERVICES)} 筆服務, {len(SAMPLE_REVENUES)} 筆收款"
    )
