"""Meal plan templates."""

from health_tracker.domain.catalog import MacroRatio, Meal, MealPlan, MealSlots


def _meal(  # noqa: PLR0913
    name: str,
    calories: float,
    protein: float,
    carbs: float,
    fat: float,
    ingredients: tuple[str, ...],
    prep_time: int,
) -> Meal:
    return Meal(
        name=name,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        ingredients=ingredients,
        prep_time=prep_time,
    )


_HUMMUS_SNACK = _meal(
    "Hummus with Vegetable Sticks",
    160,
    5,
    15,
    10,
    ("Hummus", "Carrot sticks", "Cucumber sticks", "Bell pepper strips"),
    5,
)

MEAL_PLANS: tuple[MealPlan, ...] = (
    MealPlan(
        id="balanced-nutrition",
        name="Balanced Nutrition Plan",
        description=(
            "A well-rounded meal plan with balanced macronutrients for general "
            "health and wellness."
        ),
        target_calories=2000,
        macro_ratio=MacroRatio(protein=25, carbs=50, fat=25),
        dietary_preferences=("balanced", "omnivore"),
        meals=MealSlots(
            breakfast=(
                _meal(
                    "Greek Yogurt Parfait",
                    320,
                    20,
                    35,
                    8,
                    ("Greek yogurt", "Berries", "Granola", "Honey"),
                    5,
                ),
                _meal(
                    "Avocado Toast with Egg",
                    350,
                    15,
                    30,
                    18,
                    ("Whole grain bread", "Avocado", "Egg", "Cherry tomatoes"),
                    10,
                ),
                _meal(
                    "Oatmeal with Fruit and Nuts",
                    310,
                    10,
                    45,
                    10,
                    ("Oats", "Milk", "Banana", "Berries", "Almonds", "Cinnamon"),
                    8,
                ),
            ),
            lunch=(
                _meal(
                    "Quinoa Bowl with Grilled Chicken",
                    450,
                    35,
                    45,
                    12,
                    ("Quinoa", "Grilled chicken breast", "Avocado", "Mixed vegetables"),
                    20,
                ),
                _meal(
                    "Mediterranean Salad with Tuna",
                    420,
                    30,
                    30,
                    18,
                    ("Mixed greens", "Tuna", "Cherry tomatoes", "Olives", "Feta cheese"),
                    15,
                ),
                _meal(
                    "Turkey and Vegetable Wrap",
                    380,
                    25,
                    40,
                    12,
                    ("Whole grain wrap", "Turkey breast", "Hummus", "Spinach"),
                    10,
                ),
            ),
            dinner=(
                _meal(
                    "Baked Salmon with Roasted Vegetables",
                    520,
                    40,
                    25,
                    28,
                    ("Salmon fillet", "Broccoli", "Sweet potato", "Olive oil"),
                    25,
                ),
                _meal(
                    "Stir-Fried Tofu with Brown Rice",
                    480,
                    25,
                    60,
                    15,
                    ("Tofu", "Brown rice", "Bell peppers", "Broccoli", "Soy sauce"),
                    30,
                ),
                _meal(
                    "Lean Beef Stir Fry",
                    490,
                    35,
                    40,
                    20,
                    ("Lean beef strips", "Brown rice", "Mixed vegetables", "Ginger"),
                    25,
                ),
            ),
            snacks=(
                _meal(
                    "Apple with Almond Butter",
                    190,
                    6,
                    20,
                    12,
                    ("Apple", "Almond butter"),
                    2,
                ),
                _meal(
                    "Greek Yogurt with Berries",
                    150,
                    15,
                    15,
                    3,
                    ("Greek yogurt", "Mixed berries", "Honey"),
                    3,
                ),
                _HUMMUS_SNACK,
            ),
        ),
    ),
    MealPlan(
        id="high-protein",
        name="High Protein Plan",
        description=(
            "Protein-focused meal plan designed for muscle building and recovery."
        ),
        target_calories=2200,
        macro_ratio=MacroRatio(protein=40, carbs=30, fat=30),
        dietary_preferences=("high-protein", "fitness", "muscle-building"),
        meals=MealSlots(
            breakfast=(
                _meal(
                    "Protein Oatmeal",
                    380,
                    30,
                    40,
                    10,
                    ("Oats", "Protein powder", "Milk", "Banana", "Peanut butter"),
                    8,
                ),
                _meal(
                    "Egg White Scramble",
                    350,
                    35,
                    20,
                    15,
                    ("Egg whites", "Spinach", "Bell peppers", "Turkey bacon"),
                    15,
                ),
            ),
            lunch=(
                _meal(
                    "Grilled Chicken Salad",
                    450,
                    40,
                    25,
                    20,
                    ("Grilled chicken breast", "Mixed greens", "Avocado"),
                    20,
                ),
                _meal(
                    "Tuna Protein Bowl",
                    480,
                    45,
                    30,
                    18,
                    ("Tuna", "Quinoa", "Edamame", "Bell peppers", "Cucumber"),
                    15,
                ),
            ),
            dinner=(
                _meal(
                    "Lean Steak with Sweet Potato",
                    520,
                    45,
                    30,
                    22,
                    ("Lean beef steak", "Sweet potato", "Broccoli", "Olive oil"),
                    25,
                ),
                _meal(
                    "Baked Cod with Quinoa",
                    480,
                    42,
                    35,
                    15,
                    ("Cod fillet", "Quinoa", "Asparagus", "Lemon"),
                    30,
                ),
            ),
            snacks=(
                _meal(
                    "Protein Shake",
                    180,
                    25,
                    10,
                    3,
                    ("Protein powder", "Almond milk", "Ice"),
                    3,
                ),
                _meal(
                    "Cottage Cheese with Berries",
                    160,
                    20,
                    12,
                    5,
                    ("Cottage cheese", "Mixed berries", "Cinnamon"),
                    2,
                ),
            ),
        ),
    ),
    MealPlan(
        id="low-carb",
        name="Low Carb Plan",
        description=(
            "Reduced carbohydrate meal plan focused on protein and healthy fats."
        ),
        target_calories=1800,
        macro_ratio=MacroRatio(protein=30, carbs=20, fat=50),
        dietary_preferences=("low-carb", "keto-friendly"),
        meals=MealSlots(
            breakfast=(
                _meal(
                    "Avocado and Egg Bowl",
                    350,
                    18,
                    10,
                    28,
                    ("Eggs", "Avocado", "Spinach", "Cherry tomatoes", "Olive oil"),
                    12,
                ),
                _meal(
                    "Chia Almond Pudding",
                    320,
                    12,
                    15,
                    25,
                    ("Chia seeds", "Almond milk", "Almonds", "Berries"),
                    10,
                ),
            ),
            lunch=(
                _meal(
                    "Cobb Salad",
                    450,
                    30,
                    12,
                    32,
                    ("Romaine lettuce", "Grilled chicken", "Bacon", "Avocado"),
                    20,
                ),
                _meal(
                    "Zucchini Noodles with Pesto and Chicken",
                    420,
                    35,
                    10,
                    28,
                    ("Zucchini", "Grilled chicken", "Pesto", "Parmesan cheese"),
                    25,
                ),
            ),
            dinner=(
                _meal(
                    "Baked Salmon with Asparagus",
                    480,
                    40,
                    8,
                    32,
                    ("Salmon fillet", "Asparagus", "Lemon", "Olive oil"),
                    25,
                ),
                _meal(
                    "Cauliflower Fried Rice with Shrimp",
                    420,
                    35,
                    15,
                    25,
                    ("Cauliflower rice", "Shrimp", "Eggs", "Sesame oil"),
                    30,
                ),
            ),
            snacks=(
                _meal(
                    "Cheese and Nuts",
                    200,
                    10,
                    5,
                    16,
                    ("Cheese cubes", "Mixed nuts"),
                    1,
                ),
                _meal(
                    "Celery with Almond Butter",
                    150,
                    5,
                    8,
                    12,
                    ("Celery sticks", "Almond butter"),
                    3,
                ),
            ),
        ),
    ),
    MealPlan(
        id="plant-based",
        name="Plant-Based Plan",
        description="Nutrient-rich vegan meal plan with complete protein sources.",
        target_calories=1900,
        macro_ratio=MacroRatio(protein=20, carbs=55, fat=25),
        dietary_preferences=("vegan", "plant-based", "vegetarian"),
        meals=MealSlots(
            breakfast=(
                _meal(
                    "Tofu Scramble with Vegetables",
                    320,
                    18,
                    25,
                    16,
                    ("Tofu", "Nutritional yeast", "Bell peppers", "Spinach"),
                    15,
                ),
                _meal(
                    "Overnight Oats with Chia",
                    340,
                    12,
                    50,
                    10,
                    ("Oats", "Chia seeds", "Plant milk", "Banana", "Berries"),
                    10,
                ),
            ),
            lunch=(
                _meal(
                    "Chickpea and Vegetable Buddha Bowl",
                    420,
                    15,
                    60,
                    14,
                    ("Chickpeas", "Quinoa", "Roasted sweet potato", "Kale"),
                    25,
                ),
                _meal(
                    "Lentil Soup with Whole Grain Bread",
                    380,
                    18,
                    55,
                    8,
                    ("Lentils", "Carrots", "Celery", "Whole grain bread"),
                    30,
                ),
            ),
            dinner=(
                _meal(
                    "Tempeh Stir-Fry with Brown Rice",
                    450,
                    22,
                    55,
                    16,
                    ("Tempeh", "Brown rice", "Broccoli", "Snow peas"),
                    30,
                ),
                _meal(
                    "Stuffed Bell Peppers with Quinoa",
                    420,
                    16,
                    50,
                    18,
                    ("Bell peppers", "Quinoa", "Black beans", "Corn"),
                    40,
                ),
            ),
            snacks=(
                _HUMMUS_SNACK,
                _meal(
                    "Trail Mix",
                    180,
                    6,
                    15,
                    12,
                    ("Almonds", "Walnuts", "Dried cranberries", "Pumpkin seeds"),
                    2,
                ),
            ),
        ),
    ),
)
