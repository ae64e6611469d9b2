"""Rutas disponibles para los clientes finales autenticados."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.notifications import update_user_notification
from tradersbloc.application.use_cases.users import (
    create_funding_request as create_funding_request_uc,
    create_invoice as create_invoice_uc,
    create_milestone as create_milestone_uc,
    delete_invoice as delete_invoice_uc,
    delete_milestone as delete_milestone_uc,
    get_user_data as get_user_data_uc,
    list_active_vendors as list_active_vendors_uc,
    list_user_invoices as list_user_invoices_uc,
    update_invoice as update_invoice_uc,
    update_milestone as update_milestone_uc,
    update_user as update_user_uc,
    upsert_kyc_documents as upsert_kyc_documents_uc,
)
from tradersbloc.domain.entities import AuthSession
from tradersbloc.infrastructure.database import get_db
from tradersbloc.infrastructure.security import PasswordHasher
from tradersbloc.interfaces.api.dependencies import get_password_hasher, require_customer
from tradersbloc.interfaces.api.schemas import (
    FundingRequestCreate,
    FundingRequestRead,
    InvoiceCreate,
    InvoiceRead,
    InvoiceUpdate,
    KYCDocumentRead,
    KYCDocumentsUpsert,
    MilestoneCreate,
    MilestoneRead,
    MilestoneUpdate,
    NotificationRead,
    NotificationReadUpdate,
    UserDataRead,
    UserRead,
    UserUpdate,
    VendorRead,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserDataRead)
def read_current_user(
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    """Devuelve el cliente autenticado con todos sus registros asociados."""

    user_data = get_user_data_uc(db, user_id=auth_session.identity_id)
    return UserDataRead.model_validate(user_data)


@router.put("/me", response_model=UserRead)
def update_current_user(
    payload: UserUpdate,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    auth_session: AuthSession = Depends(require_customer),
):
    """Actualiza el perfil del cliente autenticado."""

    user = update_user_uc(
        db, hasher, user_id=auth_session.identity_id, **payload.model_dump()
    )
    return UserRead.model_validate(user)


@router.post("/me/kyc-documents", response_model=list[KYCDocumentRead])
def upsert_kyc_documents(
    payload: KYCDocumentsUpsert,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    """Registra o reemplaza los documentos KYC del cliente en una sola operación."""

    documents = upsert_kyc_documents_uc(
        db,
        user_id=auth_session.identity_id,
        documents=[document.model_dump() for document in payload.documents],
    )
    return [KYCDocumentRead.model_validate(document) for document in documents]


@router.get("/vendors", response_model=list[VendorRead])
def list_active_vendors(
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_customer),
):
    return [VendorRead.model_validate(vendor) for vendor in list_active_vendors_uc(db)]


@router.get("/invoices", response_model=list[InvoiceRead])
def list_invoices(
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    invoices = list_user_invoices_uc(db, user_id=auth_session.identity_id)
    return [InvoiceRead.model_validate(invoice) for invoice in invoices]


@router.post("/invoices", response_model=InvoiceRead, status_code=status.HTTP_201_CREATED)
def create_invoice(
    payload: InvoiceCreate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    """Registra una factura para financiamiento."""

    invoice = create_invoice_uc(db, user_id=auth_session.identity_id, **payload.model_dump())
    return InvoiceRead.model_validate(invoice)


@router.put("/invoices/{invoice_id}", response_model=InvoiceRead)
def update_invoice(
    invoice_id: int,
    payload: InvoiceUpdate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    invoice = update_invoice_uc(
        db,
        user_id=auth_session.identity_id,
        invoice_id=invoice_id,
        **payload.model_dump(),
    )
    return InvoiceRead.model_validate(invoice)


@router.delete("/invoices/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_invoice(
    invoice_id: int,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    """Elimina lógicamente una factura propia."""

    delete_invoice_uc(db, user_id=auth_session.identity_id, invoice_id=invoice_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/milestones", response_model=MilestoneRead, status_code=status.HTTP_201_CREATED
)
def create_milestone(
    payload: MilestoneCreate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    milestone = create_milestone_uc(
        db, user_id=auth_session.identity_id, **payload.model_dump()
    )
    return MilestoneRead.model_validate(milestone)


@router.put("/milestones/{milestone_id}", response_model=MilestoneRead)
def update_milestone(
    milestone_id: int,
    payload: MilestoneUpdate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    milestone = update_milestone_uc(
        db,
        user_id=auth_session.identity_id,
        milestone_id=milestone_id,
        **payload.model_dump(),
    )
    return MilestoneRead.model_validate(milestone)


@router.delete("/milestones/{milestone_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_milestone(
    milestone_id: int,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    delete_milestone_uc(db, user_id=auth_session.identity_id, milestone_id=milestone_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/funding-requests",
    response_model=FundingRequestRead,
    status_code=status.HTTP_201_CREATED,
)
def create_funding_request(
    payload: FundingRequestCreate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    """Solicita financiamiento sobre una factura propia."""

    funding_request = create_funding_request_uc(
        db, user_id=auth_session.identity_id, **payload.model_dump()
    )
    return FundingRequestRead.model_validate(funding_request)


@router.patch("/notifications/{notification_id}", response_model=NotificationRead)
def update_notification(
    notification_id: int,
    payload: NotificationReadUpdate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_customer),
):
    """Marca una notificación propia como leída o no leída."""

    notification = update_user_notification(
        db,
        user_id=auth_session.identity_id,
        notification_id=notification_id,
        is_read=payload.is_read,
    )
    return NotificationRead.model_validate(notification)
