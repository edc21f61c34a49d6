"""Cache keys for raw event rows. Derived status is never cached."""

EVENTS_LIST = "events:list"


def event_detail(event_id: object) -> str:
    return f"events:{event_id}"
