from events.stores.interfaces import EventStore, RegistrationStore, StudentStore, UserStore

__all__ = ["EventStore", "RegistrationStore", "StudentStore", "UserStore"]
