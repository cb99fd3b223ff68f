"""本地存档。"""
from pet_terminal.storage.store import PetStore, SaveDocument

__all__ = ["PetStore", "SaveDocument"]
