# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Emails sent to site visitors."""

import logging
from dataclasses import dataclass
from html import escape

from src.integrations.base import EmailProvider
from src.models import Lead
from src.models.base import utcnow

logger = logging.getLogger(__name__)

CONFIRMATION_SUBJECT = "Thanks for subscribing to Gulf Rate Alerts"


@dataclass
class EmailContent:
    """Rendered email ready to send."""

    subject: str
    body: str
    body_html: str


def render_confirmation_email(lead: Lead) -> EmailContent:
    """Render the rate alert confirmation for a new lead."""
    year = utcnow().year
    pair = f"{lead.from_currency} to {lead.to_currency}"

    text_lines = [
        f"Hello {lead.full_name},",
        "",
        "Thank you for subscribing to Gulf Rate alerts. We'll notify you when "
        f"the exchange rate from {pair} reaches your target rate.",
    ]
    if lead.target_rate:
        text_lines.append(f"Your target rate: {lead.target_rate}")
    text_lines += [
        "",
        "You can update your preferences or unsubscribe at any time by "
        "visiting your profile on our website.",
        "",
        "Best regards,",
        "The Gulf Rate Team",
        "",
        f"This email was sent to {lead.email}. If you didn't sign up for rate "
        "alerts, please ignore this email.",
    ]

    target_html = (
        f"<p>Your target rate: <strong>{escape(lead.target_rate)}</strong></p>"
        if lead.target_rate
        else ""
    )
    body_html = f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <div style="background-color: #0F52BA; padding: 20px; text-align: center; color: white;">
    <h1>Gulf Rate</h1>
  </div>
  <div style="padding: 20px; border: 1px solid #eee; background-color: #fff;">
    <h2>Thank you for subscribing to Rate Alerts!</h2>
    <p>Hello {escape(lead.full_name)},</p>
    <p>Thank you for subscribing to Gulf Rate alerts. We'll notify you when the exchange rate from {escape(pair)} reaches your target rate.</p>
    {target_html}
    <p>You can update your preferences or unsubscribe at any time by visiting your profile on our website.</p>
    <p>Best regards,<br>The Gulf Rate Team</p>
  </div>
  <div style="background-color: #f5f5f5; padding: 15px; text-align: center; font-size: 12px; color: #666;">
    <p>&copy; {year} Gulf Rate. All rights reserved.</p>
    <p>This email was sent to {escape(lead.email)}. If you didn't sign up for rate alerts, please ignore this email.</p>
  </div>
</div>
"""
    return EmailContent(
        subject=CONFIRMATION_SUBJECT,
        body="\n".join(text_lines),
        body_html=body_html,
    )


def send_confirmation_email(sender: EmailProvider, lead: Lead) -> None:
    """Send the subscription confirmation to a lead.

    Raises:
        EmailDeliveryError: If the provider could not send the message.
    """
    content = render_confirmation_email(lead)
    sender.send_email(
        to=[lead.email],
        subject=content.subject,
        body=content.body,
        body_html=content.body_html,
    )
