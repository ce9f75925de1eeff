from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FaqItem(BaseModel):
    """Question and answer shown on the help page."""

    question: str
    answer: str
    category: str

    model_config = ConfigDict(frozen=True)


FAQ_CATEGORY_TITLES: dict[str, str] = {
    "getting-started": "Getting Started",
    "verification": "Verification Process",
    "payments": "Payments & Billing",
    "account": "Account Management",
}


__all__ = ["FAQ_CATEGORY_TITLES", "FaqItem"]
