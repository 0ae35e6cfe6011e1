"""Nutrition database built from USDA reference values."""

from health_tracker.domain.catalog import Nutrients, NutritionItem, Serving

FOOD_CATEGORIES = (
    "Fruits",
    "Vegetables",
    "Proteins",
    "Dairy",
    "Grains",
    "Nuts & Seeds",
    "Legumes",
    "Beverages",
    "Processed Grains",
    "Snacks",
)

DIETARY_TAGS = (
    "vegetarian",
    "vegan",
    "gluten-free",
    "dairy-free",
    "keto-friendly",
    "paleo-friendly",
    "low-carb",
    "high-protein",
    "high-fiber",
    "heart-healthy",
    "superfood",
    "antioxidant-rich",
    "omega-3-rich",
    "probiotic",
)


def _item(  # noqa: PLR0913
    item_id: str,
    name: str,
    category: str,
    serving: tuple[float, str, float],
    macros: tuple[float, float, float, float, float, float, float],
    tags: tuple[str, ...],
    *,
    brand: str | None = None,
    glycemic_index: int | None = None,
) -> NutritionItem:
    calories, protein, carbs, fat, fiber, sugar, sodium = macros
    amount, unit, grams = serving
    return NutritionItem(
        id=item_id,
        name=name,
        category=category,
        serving=Serving(amount=amount, unit=unit, grams=grams),
        nutrition=Nutrients(
            calories=calories,
            protein=protein,
            carbs=carbs,
            fat=fat,
            fiber=fiber,
            sugar=sugar,
            sodium=sodium,
        ),
        brand=brand,
        glycemic_index=glycemic_index,
        tags=tags,
    )


# macros: calories, protein, carbs, fat, fiber, sugar, sodium (mg)
FOODS: tuple[NutritionItem, ...] = (
    _item(
        "apple-medium",
        "Apple",
        "Fruits",
        (1, "medium", 182),
        (95, 0.5, 25, 0.3, 4.4, 19, 2),
        ("fresh", "raw", "natural"),
        glycemic_index=36,
    ),
    _item(
        "banana-medium",
        "Banana",
        "Fruits",
        (1, "medium", 118),
        (105, 1.3, 27, 0.4, 3.1, 14, 1),
        ("fresh", "raw", "potassium-rich"),
        glycemic_index=51,
    ),
    _item(
        "orange-medium",
        "Orange",
        "Fruits",
        (1, "medium", 154),
        (62, 1.2, 15.4, 0.2, 3.1, 12.2, 0),
        ("fresh", "citrus", "vitamin-c-rich"),
    ),
    _item(
        "strawberries-cup",
        "Strawberries",
        "Fruits",
        (1, "cup", 152),
        (49, 1, 11.7, 0.5, 3, 7.4, 1),
        ("fresh", "berries", "antioxidant-rich"),
    ),
    _item(
        "blueberries-cup",
        "Blueberries",
        "Fruits",
        (1, "cup", 148),
        (84, 1.1, 21.5, 0.5, 3.6, 15, 1),
        ("fresh", "berries", "superfood", "antioxidant-rich"),
    ),
    _item(
        "broccoli-cup",
        "Broccoli",
        "Vegetables",
        (1, "cup chopped", 91),
        (25, 3, 5, 0.3, 2.3, 1.5, 33),
        ("cruciferous", "vitamin-rich", "low-calorie"),
    ),
    _item(
        "spinach-cup",
        "Spinach",
        "Vegetables",
        (1, "cup raw", 30),
        (7, 0.9, 1.1, 0.1, 0.7, 0.1, 24),
        ("leafy-green", "iron-rich", "low-calorie"),
    ),
    _item(
        "sweet-potato-medium",
        "Sweet Potato",
        "Vegetables",
        (1, "medium baked", 128),
        (112, 2, 26, 0.1, 3.9, 5.4, 6),
        ("root-vegetable", "vitamin-a-rich", "complex-carbs"),
    ),
    _item(
        "carrots-cup",
        "Carrots",
        "Vegetables",
        (1, "cup chopped", 128),
        (52, 1.2, 12.3, 0.3, 3.6, 6, 88),
        ("root-vegetable", "beta-carotene-rich"),
    ),
    _item(
        "chicken-breast-100g",
        "Chicken Breast",
        "Proteins",
        (100, "grams", 100),
        (165, 31, 0, 3.6, 0, 0, 74),
        ("lean-protein", "poultry", "high-protein"),
    ),
    _item(
        "salmon-100g",
        "Atlantic Salmon",
        "Proteins",
        (100, "grams", 100),
        (208, 25.4, 0, 12.4, 0, 0, 59),
        ("fish", "omega-3-rich", "high-protein"),
    ),
    _item(
        "eggs-large",
        "Eggs",
        "Proteins",
        (1, "large", 50),
        (70, 6, 0.6, 5, 0, 0.6, 70),
        ("complete-protein", "vitamin-d-rich"),
    ),
    _item(
        "greek-yogurt-cup",
        "Greek Yogurt",
        "Dairy",
        (1, "cup", 245),
        (130, 23, 9, 0, 0, 9, 65),
        ("probiotic", "high-protein", "calcium-rich"),
        brand="Plain, Non-fat",
    ),
    _item(
        "brown-rice-cup",
        "Brown Rice",
        "Grains",
        (1, "cup cooked", 195),
        (216, 5, 45, 1.8, 3.5, 0.7, 10),
        ("whole-grain", "complex-carbs", "gluten-free"),
    ),
    _item(
        "quinoa-cup",
        "Quinoa",
        "Grains",
        (1, "cup cooked", 185),
        (222, 8, 39, 3.6, 5, 1.6, 13),
        ("complete-protein", "gluten-free", "superfood"),
    ),
    _item(
        "oats-cup",
        "Oatmeal",
        "Grains",
        (1, "cup cooked", 234),
        (147, 5.9, 25, 2.3, 4, 0.6, 9),
        ("whole-grain", "heart-healthy", "fiber-rich"),
    ),
    _item(
        "almonds-28g",
        "Almonds",
        "Nuts & Seeds",
        (28, "grams (23 nuts)", 28),
        (164, 6, 6, 14, 3.5, 1.2, 1),
        ("healthy-fats", "vitamin-e-rich", "heart-healthy"),
    ),
    _item(
        "walnuts-28g",
        "Walnuts",
        "Nuts & Seeds",
        (28, "grams (14 halves)", 28),
        (185, 4.3, 3.9, 18.5, 1.9, 0.7, 1),
        ("omega-3-rich", "brain-healthy", "antioxidant-rich"),
    ),
    _item(
        "chia-seeds-28g",
        "Chia Seeds",
        "Nuts & Seeds",
        (28, "grams (2 tbsp)", 28),
        (138, 4.7, 12, 8.7, 9.8, 0, 5),
        ("superfood", "omega-3-rich", "fiber-rich", "calcium-rich"),
    ),
    _item(
        "black-beans-cup",
        "Black Beans",
        "Legumes",
        (1, "cup cooked", 172),
        (227, 15.2, 40.8, 0.9, 15, 0.6, 2),
        ("high-fiber", "plant-protein", "folate-rich"),
    ),
    _item(
        "lentils-cup",
        "Lentils",
        "Legumes",
        (1, "cup cooked", 198),
        (230, 17.9, 39.9, 0.8, 15.6, 3.6, 4),
        ("high-protein", "iron-rich", "folate-rich"),
    ),
    _item(
        "water-cup",
        "Water",
        "Beverages",
        (1, "cup", 240),
        (0, 0, 0, 0, 0, 0, 0),
        ("hydration", "zero-calorie"),
    ),
    _item(
        "green-tea-cup",
        "Green Tea",
        "Beverages",
        (1, "cup", 245),
        (2, 0.5, 0, 0, 0, 0, 2),
        ("antioxidant-rich", "caffeine", "metabolism-boost"),
    ),
    _item(
        "white-bread-slice",
        "White Bread",
        "Processed Grains",
        (1, "slice", 28),
        (79, 2.3, 14.6, 1.1, 0.8, 1.4, 147),
        ("processed", "refined-carbs"),
    ),
    _item(
        "potato-chips-28g",
        "Potato Chips",
        "Snacks",
        (28, "grams (about 15 chips)", 28),
        (152, 2, 15, 10, 1.4, 0.1, 149),
        ("processed", "high-sodium", "snack-food"),
    ),
)
