# app/tasks/expire.py
import threading
from typing import Callable, Dict, List

from app.utils.logging import get_logger

logger = get_logger(__name__)


class SessionExpiryScheduler:
    """
    Odroczone wywolania kluczowane id sesji checkout.
    Kazdy klucz ma co najwyzej jeden timer, ponowne schedule podmienia stary.
    Callback musi sam sprawdzic stan sesji, cancel moze przegrac wyscig z timerem.
    """

    def __init__(self) -> None:
        self._timers: Dict[str, threading.Timer] = {}
        self._lock = threading.Lock()

    def schedule(self, key: str, delay_seconds: float, callback: Callable[[str], None]) -> None:
        timer = threading.Timer(max(delay_seconds, 0), self._fire, args=(key, callback))
        timer.daemon = True

        with self._lock:
            previous = self._timers.pop(key, None)
            if previous:
                previous.cancel()
            self._timers[key] = timer

        timer.start()
        logger.info(f"Zaplanowano wygasniecie {key} za {delay_seconds:.0f}s")

    def _fire(self, key: str, callback: Callable[[str], None]) -> None:
        with self._lock:
            self._timers.pop(key, None)
        try:
            callback(key)
        except Exception as e:
            logger.error(f"Blad podczas wygaszania {key}: {e}")

    def cancel(self, key: str) -> bool:
        with self._lock:
            timer = self._timers.pop(key, None)
        if not timer:
            return False
        timer.cancel()
        return True

    def pending(self) -> List[str]:
        with self._lock:
            return list(self._timers)

    def shutdown(self) -> None:
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()
        logger.info(f"Zatrzymano scheduler wygasania, anulowano {len(timers)} timerow")
