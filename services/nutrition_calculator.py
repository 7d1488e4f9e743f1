"""Nutrition calculation helpers.

Provides the BMI computation used when health profiles are read.
"""

from typing import Optional
from core.logger import get_logger

logger = get_logger("services.nutrition_calculator")


class NutritionCalculator:
    """Class-based nutrition calculator used across the app."""

    def calculate_bmi(self, height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[float]:
        """Calculate BMI from height in cm and weight in kg.

        Returns None when either value is missing or the height is not
        positive. The result is not rounded.
        """
        if height_cm is None or weight_kg is None or height_cm <= 0:
            return None
        h_m = height_cm / 100.0
        bmi = weight_kg / (h_m * h_m)
        logger.debug("BMI calculated: %s", bmi)
        return bmi


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = ["NutritionCalculator", "nutrition_calculator"]
