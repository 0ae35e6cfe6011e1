"""Clinical health metrics with reference ranges and risk bands."""

from health_tracker.domain.catalog import HealthMetric, ValueRange

HEALTH_METRIC_CATEGORIES = (
    "Cardiovascular",
    "Body Composition",
    "Blood Chemistry",
    "Blood Count",
    "Liver Function",
    "Kidney Function",
    "Thyroid Function",
    "Vitamins",
    "Minerals",
)


def _bands(
    low: tuple[float, float], moderate: tuple[float, float], high: tuple[float, float]
) -> dict[str, ValueRange]:
    return {
        "low_risk": ValueRange(*low),
        "moderate_risk": ValueRange(*moderate),
        "high_risk": ValueRange(*high),
    }


HEALTH_METRICS: tuple[HealthMetric, ...] = (
    HealthMetric(
        id="blood-pressure-systolic",
        name="Systolic Blood Pressure",
        category="Cardiovascular",
        unit="mmHg",
        description="Pressure in arteries when heart beats",
        general_range=ValueRange(90, 120),
        **_bands((90, 120), (121, 139), (140, 200)),
        lower_is_better=True,
        factors=("Age", "Weight", "Exercise", "Stress", "Diet", "Smoking"),
        recommendations=(
            "Maintain healthy weight",
            "Exercise regularly",
            "Limit sodium intake",
            "Manage stress",
            "Avoid smoking",
        ),
    ),
    HealthMetric(
        id="blood-pressure-diastolic",
        name="Diastolic Blood Pressure",
        category="Cardiovascular",
        unit="mmHg",
        description="Pressure in arteries when heart rests",
        general_range=ValueRange(60, 80),
        **_bands((60, 80), (81, 89), (90, 120)),
        lower_is_better=True,
    ),
    HealthMetric(
        id="resting-heart-rate",
        name="Resting Heart Rate",
        category="Cardiovascular",
        unit="bpm",
        description="Heart rate when at complete rest",
        general_range=ValueRange(60, 100),
        **_bands((60, 100), (101, 110), (111, 150)),
        factors=("Fitness level", "Age", "Medications", "Stress", "Caffeine"),
        recommendations=(
            "Regular cardiovascular exercise",
            "Manage stress levels",
            "Limit caffeine intake",
            "Get adequate sleep",
        ),
    ),
    HealthMetric(
        id="vo2-max",
        name="VO2 Max",
        category="Cardiovascular",
        unit="ml/kg/min",
        description="Maximum oxygen consumption during exercise",
        male_range=ValueRange(40, 60),
        female_range=ValueRange(35, 55),
        **_bands((45, 70), (35, 44), (20, 34)),
    ),
    HealthMetric(
        id="bmi",
        name="Body Mass Index",
        category="Body Composition",
        unit="kg/m²",
        description="Weight relative to height",
        general_range=ValueRange(18.5, 24.9),
        **_bands((18.5, 24.9), (25, 29.9), (30, 50)),
        factors=("Diet", "Exercise", "Genetics", "Age", "Muscle mass"),
        recommendations=(
            "Maintain balanced diet",
            "Regular physical activity",
            "Monitor portion sizes",
            "Focus on whole foods",
        ),
    ),
    HealthMetric(
        id="body-fat-percentage",
        name="Body Fat Percentage",
        category="Body Composition",
        unit="%",
        description="Percentage of body weight that is fat",
        male_range=ValueRange(10, 20),
        female_range=ValueRange(16, 25),
        **_bands((10, 25), (26, 35), (36, 50)),
    ),
    HealthMetric(
        id="waist-circumference",
        name="Waist Circumference",
        category="Body Composition",
        unit="cm",
        description="Measurement around the waist",
        male_range=ValueRange(70, 94),
        female_range=ValueRange(65, 80),
        **_bands((65, 94), (95, 102), (103, 150)),
    ),
    HealthMetric(
        id="total-cholesterol",
        name="Total Cholesterol",
        category="Blood Chemistry",
        unit="mg/dL",
        description="Total amount of cholesterol in blood",
        general_range=ValueRange(125, 200),
        **_bands((125, 200), (201, 239), (240, 400)),
        lower_is_better=True,
        factors=("Diet", "Exercise", "Genetics", "Weight", "Age"),
        recommendations=(
            "Limit saturated fats",
            "Increase fiber intake",
            "Regular exercise",
            "Maintain healthy weight",
        ),
    ),
    HealthMetric(
        id="ldl-cholesterol",
        name="LDL Cholesterol",
        category="Blood Chemistry",
        unit="mg/dL",
        description="Low-density lipoprotein (bad cholesterol)",
        general_range=ValueRange(50, 100),
        **_bands((50, 100), (101, 159), (160, 300)),
        lower_is_better=True,
    ),
    HealthMetric(
        id="hdl-cholesterol",
        name="HDL Cholesterol",
        category="Blood Chemistry",
        unit="mg/dL",
        description="High-density lipoprotein (good cholesterol)",
        male_range=ValueRange(40, 100),
        female_range=ValueRange(50, 100),
        **_bands((60, 100), (40, 59), (20, 39)),
    ),
    HealthMetric(
        id="triglycerides",
        name="Triglycerides",
        category="Blood Chemistry",
        unit="mg/dL",
        description="Type of fat found in blood",
        general_range=ValueRange(50, 150),
        **_bands((50, 150), (151, 199), (200, 500)),
        lower_is_better=True,
    ),
    HealthMetric(
        id="blood-glucose-fasting",
        name="Fasting Blood Glucose",
        category="Blood Chemistry",
        unit="mg/dL",
        description="Blood sugar level after 8+ hours fasting",
        general_range=ValueRange(70, 99),
        **_bands((70, 99), (100, 125), (126, 300)),
        lower_is_better=True,
        factors=("Diet", "Exercise", "Weight", "Stress", "Sleep"),
        recommendations=(
            "Limit refined sugars",
            "Regular physical activity",
            "Maintain healthy weight",
            "Monitor carbohydrate intake",
        ),
    ),
    HealthMetric(
        id="hba1c",
        name="HbA1c",
        category="Blood Chemistry",
        unit="%",
        description="Average blood sugar over 2-3 months",
        general_range=ValueRange(4.0, 5.6),
        **_bands((4.0, 5.6), (5.7, 6.4), (6.5, 12.0)),
        lower_is_better=True,
    ),
    HealthMetric(
        id="hemoglobin",
        name="Hemoglobin",
        category="Blood Count",
        unit="g/dL",
        description="Protein that carries oxygen in red blood cells",
        male_range=ValueRange(13.8, 17.2),
        female_range=ValueRange(12.1, 15.1),
        **_bands((12, 17), (10, 11.9), (6, 9.9)),
    ),
    HealthMetric(
        id="white-blood-cells",
        name="White Blood Cells",
        category="Blood Count",
        unit="10³/μL",
        description="Cells that fight infection",
        general_range=ValueRange(4.5, 11.0),
        **_bands((4.5, 11.0), (11.1, 15.0), (15.1, 30.0)),
    ),
    HealthMetric(
        id="alt",
        name="ALT (Alanine Aminotransferase)",
        category="Liver Function",
        unit="U/L",
        description="Enzyme that indicates liver health",
        male_range=ValueRange(10, 40),
        female_range=ValueRange(7, 35),
        **_bands((7, 40), (41, 80), (81, 200)),
    ),
    HealthMetric(
        id="creatinine",
        name="Creatinine",
        category="Kidney Function",
        unit="mg/dL",
        description="Waste product filtered by kidneys",
        male_range=ValueRange(0.7, 1.3),
        female_range=ValueRange(0.6, 1.1),
        **_bands((0.6, 1.3), (1.4, 2.0), (2.1, 10.0)),
    ),
    HealthMetric(
        id="tsh",
        name="TSH (Thyroid Stimulating Hormone)",
        category="Thyroid Function",
        unit="mIU/L",
        description="Hormone that regulates thyroid function",
        general_range=ValueRange(0.4, 4.0),
        **_bands((0.4, 4.0), (4.1, 10.0), (10.1, 50.0)),
    ),
    HealthMetric(
        id="vitamin-d",
        name="Vitamin D",
        category="Vitamins",
        unit="ng/mL",
        description="Vitamin essential for bone health",
        general_range=ValueRange(30, 100),
        **_bands((30, 100), (20, 29), (0, 19)),
        factors=(
            "Sun exposure",
            "Diet",
            "Supplements",
            "Skin color",
            "Geographic location",
        ),
        recommendations=(
            "Get adequate sun exposure",
            "Consider vitamin D supplements",
            "Eat vitamin D rich foods",
            "Regular testing",
        ),
    ),
    HealthMetric(
        id="vitamin-b12",
        name="Vitamin B12",
        category="Vitamins",
        unit="pg/mL",
        description="Vitamin essential for nerve function",
        general_range=ValueRange(300, 900),
        **_bands((300, 900), (200, 299), (0, 199)),
    ),
    HealthMetric(
        id="iron",
        name="Iron",
        category="Minerals",
        unit="μg/dL",
        description="Mineral essential for oxygen transport",
        male_range=ValueRange(65, 175),
        female_range=ValueRange(50, 170),
        **_bands((50, 175), (30, 49), (0, 29)),
    ),
)

HEALTH_METRICS_BY_ID: dict[str, HealthMetric] = {
    metric.id: metric for metric in HEALTH_METRICS
}
