# app/data/store.py
from typing import Dict, Generic, Iterator, List, Protocol, TypeVar

V = TypeVar("V")


class KeyValueStore(Protocol[V]):
    """
    Waski interfejs magazynu (get/put/delete/values).
    Repozytoria znaja tylko ten kontrakt, wiec backend mozna podmienic
    bez ruszania logiki biznesowej.
    """

    def get(self, key: str) -> V | None: ...

    def put(self, key: str, value: V) -> None: ...

    def delete(self, key: str) -> bool: ...

    def values(self) -> List[V]: ...


class InMemoryStore(Generic[V]):
    """Slownik w pamieci procesu, kolejnosc wstawiania zachowana."""

    def __init__(self) -> None:
        self._items: Dict[str, V] = {}

    def get(self, key: str) -> V | None:
        return self._items.get(key)

    def put(self, key: str, value: V) -> None:
        self._items[key] = value

    def delete(self, key: str) -> bool:
        return self._items.pop(key, None) is not None

    def values(self) -> List[V]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)
