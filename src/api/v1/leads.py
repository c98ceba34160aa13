# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Lead capture endpoint."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_email_sender
from src.integrations.base import EmailProvider
from src.schemas.lead import LeadCreate, LeadCreatedResponse, LeadReference
from src.services import lead_service

router = APIRouter()


@router.post(
    "", response_model=LeadCreatedResponse, status_code=status.HTTP_201_CREATED
)
def create_lead(
    data: LeadCreate,
    db: Session = Depends(get_db),
    sender: EmailProvider = Depends(get_email_sender),
) -> LeadCreatedResponse:
    """Subscribe a visitor to rate alerts."""
    lead = lead_service.create_lead(db, data, sender)
    return LeadCreatedResponse(
        message="Successfully subscribed to rate alerts",
        lead=LeadReference(id=lead.id),
    )
