"""Food log loading for IngredientIQ."""

from .loader import FoodLogLoader, load_food_log, read_text_file

__all__ = ["FoodLogLoader", "load_food_log", "read_text_file"]
