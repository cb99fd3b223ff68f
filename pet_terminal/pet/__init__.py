"""宠物状态引擎：属性、等级、衰减与动作。"""
from pet_terminal.pet.decay import DecayConfig, TimeDecay, TimeSyncResult
from pet_terminal.pet.models import ActionResult, CoinEntry, MoodState, PetRecord, PetSpecies, PetStats, StatChange
from pet_terminal.pet.pet import Pet

__all__ = [
    "ActionResult",
    "CoinEntry",
    "DecayConfig",
    "MoodState",
    "Pet",
    "PetRecord",
    "PetSpecies",
    "PetStats",
    "StatChange",
    "TimeDecay",
    "TimeSyncResult",
]
