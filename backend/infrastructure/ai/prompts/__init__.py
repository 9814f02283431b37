"""Prompts for the OpenAI nutrition client."""

from infrastructure.ai.prompts.nutrition import (
    ADVICE_SYSTEM_PROMPT,
    PFC_ESTIMATE_SYSTEM_PROMPT,
    build_pfc_estimate_prompt,
)

__all__ = [
    "ADVICE_SYSTEM_PROMPT",
    "PFC_ESTIMATE_SYSTEM_PROMPT",
    "build_pfc_estimate_prompt",
]
