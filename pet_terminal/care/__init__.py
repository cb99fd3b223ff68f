"""自动照顾：需求评估、一键照顾与自动补货。"""
from pet_terminal.care.auto_care import AUTO_PURCHASE_RULES, AutoCare
from pet_terminal.care.models import (
    AutoPurchaseResult,
    AutoPurchaseRule,
    CareAction,
    CareActionResult,
    CareNeed,
    CareResult,
)

__all__ = [
    "AUTO_PURCHASE_RULES",
    "AutoCare",
    "AutoPurchaseResult",
    "AutoPurchaseRule",
    "CareAction",
    "CareActionResult",
    "CareNeed",
    "CareResult",
]
