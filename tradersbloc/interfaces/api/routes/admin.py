"""Rutas de revisión y administración para el personal."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.admins import (
    create_vendor as create_vendor_uc,
    get_admin_data as get_admin_data_uc,
    get_admin_profile as get_admin_profile_uc,
    get_dashboard_summary as get_dashboard_summary_uc,
    get_funding_request as get_funding_request_uc,
    get_invoice as get_invoice_uc,
    get_kyc_document as get_kyc_document_uc,
    get_milestone as get_milestone_uc,
    get_report_data as get_report_data_uc,
    list_funding_requests as list_funding_requests_uc,
    list_invoices as list_invoices_uc,
    list_kyc_documents as list_kyc_documents_uc,
    list_milestones as list_milestones_uc,
    list_vendors as list_vendors_uc,
    update_admin_data as update_admin_data_uc,
    update_funding_request_status as update_funding_request_status_uc,
    update_invoice_status as update_invoice_status_uc,
    update_kyc_document_status as update_kyc_document_status_uc,
    update_milestone_status as update_milestone_status_uc,
    update_vendor as update_vendor_uc,
)
from tradersbloc.application.use_cases.notifications import mark_admin_notification_as_read
from tradersbloc.application.use_cases.users import get_user_data as get_user_data_uc
from tradersbloc.domain.entities import AuthSession
from tradersbloc.domain.pagination import PageRequest
from tradersbloc.infrastructure.database import get_db
from tradersbloc.infrastructure.security import PasswordHasher
from tradersbloc.interfaces.api.dependencies import get_password_hasher, require_admin
from tradersbloc.interfaces.api.routes.pagination import page_params
from tradersbloc.interfaces.api.schemas import (
    AdminDataRead,
    AdminProfileUpdate,
    AdminRead,
    DashboardSummaryRead,
    FundingRequestRead,
    InvoiceRead,
    KYCDocumentRead,
    MilestoneRead,
    NotificationRead,
    PageRead,
    ReportRead,
    StatusUpdate,
    UserDataRead,
    VendorCreate,
    VendorRead,
    VendorUpdate,
)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/me", response_model=AdminDataRead)
def read_current_admin(
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_admin),
):
    """Devuelve el perfil del administrador junto con sus notificaciones."""

    admin_data = get_admin_data_uc(db, admin_id=auth_session.identity_id)
    return AdminDataRead.model_validate(admin_data)


@router.get("/profile", response_model=AdminRead)
def read_profile(
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_admin),
):
    admin = get_admin_profile_uc(db, admin_id=auth_session.identity_id)
    return AdminRead.model_validate(admin)


@router.put("/profile", response_model=AdminRead)
def update_profile(
    payload: AdminProfileUpdate,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    auth_session: AuthSession = Depends(require_admin),
):
    """Actualiza nombre, correo o contraseña del administrador autenticado.

    Para cambiar la contraseña deben enviarse la actual y la nueva.
    """

    admin = update_admin_data_uc(
        db, hasher, admin_id=auth_session.identity_id, **payload.model_dump()
    )
    return AdminRead.model_validate(admin)


@router.get("/dashboard", response_model=DashboardSummaryRead)
def read_dashboard(
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_admin),
):
    """Resumen de pendientes, monto financiado y actividad reciente."""

    summary = get_dashboard_summary_uc(db, admin_id=auth_session.identity_id)
    return DashboardSummaryRead.model_validate(summary)


@router.get("/reports", response_model=ReportRead)
def read_reports(
    time_range: str = Query("month", alias="timeRange"),
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    """Métricas agregadas para el rango ``week``, ``month`` o ``year``."""

    report = get_report_data_uc(db, time_range=time_range)
    return ReportRead.model_validate(report)


@router.get("/users/{user_id}", response_model=UserDataRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    """Devuelve un cliente con todos sus registros asociados."""

    return UserDataRead.model_validate(get_user_data_uc(db, user_id=user_id))


@router.get("/invoices", response_model=PageRead[InvoiceRead])
def list_invoices(
    page_request: PageRequest = Depends(page_params()),
    search: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    vendor: str | None = Query(None),
    due_from: datetime | None = Query(None, alias="dueDateFrom"),
    due_to: datetime | None = Query(None, alias="dueDateTo"),
    due_filter: str | None = Query(None, alias="dueDateFilter"),
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    """Lista paginada de facturas con búsqueda y filtros."""

    page = list_invoices_uc(
        db,
        page_request,
        search=search,
        status=status_filter,
        vendor=vendor,
        due_from=due_from,
        due_to=due_to,
        due_filter=due_filter,
    )
    return PageRead[InvoiceRead].model_validate(page)


@router.get("/invoices/{invoice_id}", response_model=InvoiceRead)
def read_invoice(
    invoice_id: int,
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    return InvoiceRead.model_validate(get_invoice_uc(db, invoice_id=invoice_id))


@router.patch("/invoices/{invoice_id}/status", response_model=InvoiceRead)
def update_invoice_status(
    invoice_id: int,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_admin),
):
    """Aprueba o rechaza una factura y notifica a su dueño."""

    invoice = update_invoice_status_uc(
        db, auth_session=auth_session, invoice_id=invoice_id, status=payload.status
    )
    return InvoiceRead.model_validate(invoice)


@router.get("/milestones", response_model=PageRead[MilestoneRead])
def list_milestones(
    page_request: PageRequest = Depends(page_params()),
    search: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    due_from: datetime | None = Query(None, alias="dueDateFrom"),
    due_to: datetime | None = Query(None, alias="dueDateTo"),
    due_filter: str | None = Query(None, alias="dueDateFilter"),
    payment_status: str | None = Query(None, alias="paymentStatus"),
    amount_min: float | None = Query(None, alias="minAmount"),
    amount_max: float | None = Query(None, alias="maxAmount"),
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    page = list_milestones_uc(
        db,
        page_request,
        search=search,
        status=status_filter,
        due_from=due_from,
        due_to=due_to,
        due_filter=due_filter,
        payment_status=payment_status,
        amount_min=amount_min,
        amount_max=amount_max,
    )
    return PageRead[MilestoneRead].model_validate(page)


@router.get("/milestones/{milestone_id}", response_model=MilestoneRead)
def read_milestone(
    milestone_id: int,
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    return MilestoneRead.model_validate(get_milestone_uc(db, milestone_id=milestone_id))


@router.patch("/milestones/{milestone_id}/status", response_model=MilestoneRead)
def update_milestone_status(
    milestone_id: int,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_admin),
):
    milestone = update_milestone_status_uc(
        db, auth_session=auth_session, milestone_id=milestone_id, status=payload.status
    )
    return MilestoneRead.model_validate(milestone)


@router.get("/kyc-documents", response_model=PageRead[KYCDocumentRead])
def list_kyc_documents(
    page_request: PageRequest = Depends(page_params()),
    search: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    document_type: str | None = Query(None, alias="documentType"),
    submitted_from: datetime | None = Query(None, alias="submittedFrom"),
    submitted_to: datetime | None = Query(None, alias="submittedTo"),
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    page = list_kyc_documents_uc(
        db,
        page_request,
        search=search,
        status=status_filter,
        document_type=document_type,
        submitted_from=submitted_from,
        submitted_to=submitted_to,
    )
    return PageRead[KYCDocumentRead].model_validate(page)


@router.get("/kyc-documents/{document_id}", response_model=KYCDocumentRead)
def read_kyc_document(
    document_id: int,
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    return KYCDocumentRead.model_validate(get_kyc_document_uc(db, document_id=document_id))


@router.patch("/kyc-documents/{document_id}/status", response_model=KYCDocumentRead)
def update_kyc_document_status(
    document_id: int,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_admin),
):
    """Registra la revisión de un documento KYC."""

    document = update_kyc_document_status_uc(
        db, auth_session=auth_session, document_id=document_id, status=payload.status
    )
    return KYCDocumentRead.model_validate(document)


@router.get("/funding-requests", response_model=PageRead[FundingRequestRead])
def list_funding_requests(
    page_request: PageRequest = Depends(page_params()),
    search: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    review_status: str | None = Query(None, alias="reviewStatus"),
    submitted_from: datetime | None = Query(None, alias="submittedFrom"),
    submitted_to: datetime | None = Query(None, alias="submittedTo"),
    amount_min: float | None = Query(None, alias="minAmount"),
    amount_max: float | None = Query(None, alias="maxAmount"),
    contribution_min: float | None = Query(None, alias="minContribution"),
    contribution_max: float | None = Query(None, alias="maxContribution"),
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    page = list_funding_requests_uc(
        db,
        page_request,
        search=search,
        status=status_filter,
        review_status=review_status,
        submitted_from=submitted_from,
        submitted_to=submitted_to,
        amount_min=amount_min,
        amount_max=amount_max,
        contribution_min=contribution_min,
        contribution_max=contribution_max,
    )
    return PageRead[FundingRequestRead].model_validate(page)


@router.get("/funding-requests/{funding_request_id}", response_model=FundingRequestRead)
def read_funding_request(
    funding_request_id: int,
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    funding_request = get_funding_request_uc(db, funding_request_id=funding_request_id)
    return FundingRequestRead.model_validate(funding_request)


@router.patch(
    "/funding-requests/{funding_request_id}/status", response_model=FundingRequestRead
)
def update_funding_request_status(
    funding_request_id: int,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_admin),
):
    """Aprueba o rechaza una solicitud de financiamiento."""

    funding_request = update_funding_request_status_uc(
        db,
        auth_session=auth_session,
        funding_request_id=funding_request_id,
        status=payload.status,
    )
    return FundingRequestRead.model_validate(funding_request)


@router.get("/vendors", response_model=PageRead[VendorRead])
def list_vendors(
    page_request: PageRequest = Depends(page_params("asc")),
    search: str | None = Query(None),
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    page = list_vendors_uc(db, page_request, search=search)
    return PageRead[VendorRead].model_validate(page)


@router.post("/vendors", response_model=VendorRead, status_code=status.HTTP_201_CREATED)
def create_vendor(
    payload: VendorCreate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_admin),
):
    """Da de alta un proveedor en el directorio."""

    vendor = create_vendor_uc(
        db, created_by=auth_session.identity_id, **payload.model_dump()
    )
    return VendorRead.model_validate(vendor)


@router.put("/vendors/{vendor_id}", response_model=VendorRead)
def update_vendor(
    vendor_id: int,
    payload: VendorUpdate,
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_admin),
):
    vendor = update_vendor_uc(db, vendor_id=vendor_id, **payload.model_dump())
    return VendorRead.model_validate(vendor)


@router.post("/notifications/{notification_id}/read", response_model=NotificationRead)
def mark_notification_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_admin),
):
    """Marca como leída una notificación dirigida al administrador."""

    notification = mark_admin_notification_as_read(
        db, auth_session=auth_session, notification_id=notification_id
    )
    return NotificationRead.model_validate(notification)
