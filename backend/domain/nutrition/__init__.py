"""Nutrition domain - BMR, daily calorie and PFC targets."""
