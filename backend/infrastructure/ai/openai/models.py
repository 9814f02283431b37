"""Pydantic models for OpenAI structured outputs.

These models define the schema for structured outputs from OpenAI API.
Used with chat.completions.parse() for native Pydantic support.
"""

from typing import List

from pydantic import BaseModel, Field


class PfcEstimateResponse(BaseModel):
    """
    Estimated macronutrients of a whole meal.

    This is the root model for OpenAI structured outputs.
    Maps to domain value object Pfc.
    """

    protein: float = Field(..., ge=0, description="Total protein in grams")
    fat: float = Field(..., ge=0, description="Total fat in grams")
    carbs: float = Field(..., ge=0, description="Total carbohydrates in grams")


class AnalyzedFoodItem(BaseModel):
    """
    Single food recognized in a meal photo.

    Maps to domain value object AnalyzedItem.
    """

    name: str = Field(..., description="Food name as it would appear on a menu")
    calories: int = Field(..., description="Estimated kcal of the visible portion")


class ImageAnalysisResponse(BaseModel):
    """
    Complete response from meal photo analysis.

    This is the root model for OpenAI structured outputs.
    """

    items: List[AnalyzedFoodItem] = Field(
        default_factory=list,
        description="Foods visible in the photo; empty if there is no food",
    )
