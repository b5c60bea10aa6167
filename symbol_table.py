from dataclasses import dataclass
from typing import Dict, List, Optional

from errors import SymbolTableFull, UnresolvedSymbol

CAPACITY = 5

@dataclass
class Slot:
    name: str
    value: int

class SymbolTable:
    """
    Tabela de símbolos de capacidade fixa.

    Cada posição está vazia (None) ou guarda um par nome/valor. Um nome
    aparece no máximo uma vez, e uma posição ocupada nunca é liberada
    durante uma execução; só `reset` limpa a tabela.
    """
    def __init__(self, capacity=CAPACITY):
        if capacity < 1:
            raise ValueError(f"Capacidade inválida: {capacity}")
        self.capacity = capacity
        self._slots: List[Optional[Slot]] = [None] * capacity

    def reset(self):
        self._slots = [None] * self.capacity

    def find(self, name) -> int:
        for index, slot in enumerate(self._slots):
            if slot is not None and slot.name == name:
                return index
        raise UnresolvedSymbol(f"Símbolo não definido: '{name}'")

    def allocate_slot(self) -> int:
        for index, slot in enumerate(self._slots):
            if slot is None:
                return index
        raise SymbolTableFull(
            f"Tabela de símbolos cheia ({self.capacity} posições ocupadas)"
        )

    def set(self, index, value):
        self._occupied(index).value = value

    def bind(self, index, name, value):
        if self._slots[index] is not None:
            raise ValueError(f"Posição {index} já está ocupada por '{self._slots[index].name}'")
        self._slots[index] = Slot(name, value)

    def get(self, index) -> int:
        return self._occupied(index).value

    def lookup(self, name) -> int:
        return self.get(self.find(name))

    def upsert(self, name, value) -> int:
        """Atualiza o símbolo existente ou ocupa uma posição livre para ele."""
        if name in self:
            index = self.find(name)
            self.set(index, value)
        else:
            index = self.allocate_slot()
            self.bind(index, name, value)
        return index

    def snapshot(self) -> Dict[str, int]:
        return {slot.name: slot.value for slot in self._slots if slot is not None}

    def _occupied(self, index) -> Slot:
        slot = self._slots[index]
        if slot is None:
            raise ValueError(f"Posição {index} está vazia")
        return slot

    def __contains__(self, name):
        return any(slot is not None and slot.name == name for slot in self._slots)

    def __len__(self):
        return sum(1 for slot in self._slots if slot is not None)

    def __str__(self):
        return f"SymbolTable({self.snapshot()}, capacidade={self.capacity})"
