"""Per-category nutrition estimates."""

from eco_lens.domain.report import Category, NutritionEstimate

NUTRITION_TABLE: dict[str, NutritionEstimate] = {
    Category.FRUIT: NutritionEstimate(kcal=60, protein_g=0.5, fat_g=0.2, carbs_g=15),
    Category.VEGETABLE: NutritionEstimate(kcal=35, protein_g=2, fat_g=0.2, carbs_g=7),
    Category.SNACK: NutritionEstimate(kcal=520, protein_g=7, fat_g=30, carbs_g=55),
    Category.DRINK: NutritionEstimate(kcal=45, protein_g=0, fat_g=0, carbs_g=11),
    Category.DAIRY: NutritionEstimate(kcal=120, protein_g=6, fat_g=6, carbs_g=8),
    Category.MEAT: NutritionEstimate(kcal=250, protein_g=26, fat_g=15, carbs_g=0),
    Category.FOOD_PRODUCT: NutritionEstimate(
        kcal=180, protein_g=5, fat_g=6, carbs_g=28
    ),
}


def estimate_nutrition(category: str, is_edible: bool) -> NutritionEstimate | None:
    """Return a per-100g estimate for edible items only."""
    if not is_edible:
        return None
    return NUTRITION_TABLE.get(
        str(category).lower(), NUTRITION_TABLE[Category.FOOD_PRODUCT]
    )
