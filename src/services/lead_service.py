# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Rate alert lead intake."""

import logging

from sqlalchemy.orm import Session

from src.integrations.base import EmailDeliveryError, EmailProvider
from src.models import Lead
from src.schemas.lead import LeadCreate
from src.services import notification_service

logger = logging.getLogger(__name__)


def create_lead(db: Session, data: LeadCreate, sender: EmailProvider) -> Lead:
    """Store a lead and send its confirmation email.

    The lead is committed before the email goes out, so a delivery failure
    never loses the subscription; it only leaves ``email_sent`` false.
    """
    lead = Lead(
        full_name=data.full_name,
        email=data.email,
        country_code=data.country_code,
        phone=data.phone,
        from_currency=data.from_currency,
        to_currency=data.to_currency,
        target_rate=data.target_rate,
        consent=data.consent,
        email_sent=False,
    )
    db.add(lead)
    db.commit()
    db.refresh(lead)
    logger.info(f"Created lead {lead.id} for {lead.from_currency}->{lead.to_currency}")

    try:
        notification_service.send_confirmation_email(sender, lead)
    except EmailDeliveryError as e:
        logger.warning(f"Confirmation email for lead {lead.id} not sent: {e}")
        return lead

    lead.email_sent = True
    db.commit()
    db.refresh(lead)
    return lead


def get_lead(db: Session, lead_id: int) -> Lead | None:
    """Get a lead by ID."""
    return db.query(Lead).filter(Lead.id == lead_id).first()
