# app/repos/session_repo.py
from app.data.store import KeyValueStore
from app.domain.schemas import CheckoutSession


class SessionRepo:
    def __init__(self, store: KeyValueStore[CheckoutSession]):
        self.store = store

    def get_session(self, session_id: str) -> CheckoutSession | None:
        return self.store.get(session_id)

    def save_session(self, session: CheckoutSession) -> CheckoutSession:
        self.store.put(session.session_id, session)
        return session
