"""Ticket backfill for registrations that have no ticket yet.

Each row is read and written independently. Two concurrent runs may both
pick the same row; nothing here prevents it.
"""

import base64
import io
import json
import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

import qrcode
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage

from events.domain import EventId, Registration, Ticket
from events.domain.errors import StoreWriteError
from events.services.clock import utc_now
from events.stores.interfaces import RegistrationStore

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5000


def ticket_payload(ticket_id: str, registration: Registration) -> str:
    return json.dumps(
        {
            "ticketId": ticket_id,
            "eventId": str(registration.event_id),
            "userId": str(registration.user_id),
        }
    )


def render_qr_data_url(payload: str) -> str:
    """Encode ``payload`` as a QR code PNG data URL."""
    qr = qrcode.QRCode(version=None, box_size=10, border=4)
    qr.add_data(payload)
    qr.make(fit=True)
    image = qr.make_image(image_factory=PilImage, fill_color="black", back_color="white")

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def new_ticket_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class BackfillResult:
    scanned: int
    issued: int
    failed: int


class TicketService:
    """Assigns ticket ids and QR images to registrations missing them."""

    def __init__(
        self,
        registrations: RegistrationStore,
        clock: Callable[[], datetime] = utc_now,
        ticket_ids: Callable[[], str] = new_ticket_id,
        qr_renderer: Callable[[str], str] = render_qr_data_url,
    ) -> None:
        self._registrations = registrations
        self._clock = clock
        self._ticket_ids = ticket_ids
        self._qr_renderer = qr_renderer

    def backfill(
        self,
        user_id: int | None = None,
        event_id: EventId | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> BackfillResult:
        rows = self._registrations.list_missing_ticket(user_id=user_id, event_id=event_id, limit=limit)
        if not rows:
            logger.info("No registrations to backfill")
            return BackfillResult(scanned=0, issued=0, failed=0)

        logger.info("Backfilling %d registrations", len(rows))
        issued = failed = 0
        for registration in rows:
            ticket = self._issue(registration)
            try:
                self._registrations.attach_ticket(registration.id, ticket)
            except StoreWriteError:
                failed += 1
                logger.error("Failed to update registration %s", registration.id, exc_info=True)
                continue
            issued += 1
            logger.info("Backfilled registration %s", registration.id)

        return BackfillResult(scanned=len(rows), issued=issued, failed=failed)

    def _issue(self, registration: Registration) -> Ticket:
        ticket_id = self._ticket_ids()
        try:
            qr_data_url = self._qr_renderer(ticket_payload(ticket_id, registration))
        except (ValueError, OSError, DataOverflowError):
            logger.warning("Failed to generate QR for %s", registration.id, exc_info=True)
            qr_data_url = None
        return Ticket(ticket_id=ticket_id, qr_data_url=qr_data_url, issued_at=self._clock())
