"""Populate ticket ids and QR images for registrations missing a ticket.

Usage:
    python manage.py backfill_tickets [--user-id ID] [--event-id UUID] [--limit N]
"""

from django.core.management.base import BaseCommand, CommandError

from events.domain import EventId
from events.services.ticket_service import DEFAULT_LIMIT, TicketService
from events.stores.django_store import DjangoRegistrationStore


class Command(BaseCommand):
    help = "Assign ticket ids and QR codes to registrations that have none."

    def add_arguments(self, parser):
        parser.add_argument("--user-id", type=int, help="Only backfill this user's registrations")
        parser.add_argument("--event-id", help="Only backfill registrations for this event")
        parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT)

    def handle(self, *args, **options):
        event_id = None
        if options["event_id"]:
            try:
                event_id = EventId.from_string(options["event_id"])
            except ValueError as exc:
                raise CommandError(f"Invalid event id: {options['event_id']}") from exc

        result = TicketService(DjangoRegistrationStore()).backfill(
            user_id=options["user_id"],
            event_id=event_id,
            limit=options["limit"],
        )
        if result.scanned == 0:
            self.stdout.write("No registrations to backfill.")
            return
        self.stdout.write(
            self.style.SUCCESS(
                f"Done. {result.issued} of {result.scanned} registrations backfilled, "
                f"{result.failed} failed."
            )
        )
