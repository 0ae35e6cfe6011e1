"""Medication reference lookups, interaction checks and dose reminders."""

from collections.abc import Iterable
from itertools import combinations

from health_tracker.catalogs.medications import MEDICATIONS, MEDICATIONS_BY_ID
from health_tracker.domain.catalog import (
    DoseReminder,
    MedicationInfo,
    MedicationInteraction,
)

INTERACTION_RECOMMENDATION = (
    "Consult with healthcare provider before taking these medications together"
)

# Frequency -> (time, meal) slots; "Once daily" depends on the timing instead.
FREQUENCY_SLOTS: dict[str, tuple[tuple[str, str | None], ...]] = {
    "Twice daily": (("08:00", None), ("20:00", None)),
    "Three times daily": (("08:00", None), ("14:00", None), ("20:00", None)),
    "With meals": (
        ("08:00", "breakfast"),
        ("13:00", "lunch"),
        ("19:00", "dinner"),
    ),
}
ONCE_DAILY_TIMES: dict[str, str] = {
    "Morning": "08:00",
    "Evening": "18:00",
    "Bedtime": "22:00",
}


def search_medications(
    query: str, medications: Iterable[MedicationInfo] = MEDICATIONS
) -> list[MedicationInfo]:
    needle = query.strip().lower()
    return [
        medication
        for medication in medications
        if needle in medication.name.lower()
        or needle in medication.generic_name.lower()
        or any(needle in brand.lower() for brand in medication.brand_names)
        or needle in medication.drug_class.lower()
        or needle in medication.category.lower()
        or any(needle in use.lower() for use in medication.used_for)
    ]


def medications_by_category(category: str) -> list[MedicationInfo]:
    return [medication for medication in MEDICATIONS if medication.category == category]


def medications_by_drug_class(drug_class: str) -> list[MedicationInfo]:
    return [
        medication for medication in MEDICATIONS if medication.drug_class == drug_class
    ]


def medications_for_condition(condition: str) -> list[MedicationInfo]:
    needle = condition.strip().lower()
    return [
        medication
        for medication in MEDICATIONS
        if any(needle in use.lower() for use in medication.used_for)
    ]


def get_medication(medication_id: str) -> MedicationInfo | None:
    return MEDICATIONS_BY_ID.get(medication_id)


def check_medication_interactions(
    medication_ids: list[str],
) -> list[MedicationInteraction]:
    """Check every pair of known medications against each other.

    A pair interacts when either drug's interaction list names the other by
    generic name, brand name or drug class term. Unknown ids are skipped.
    """
    known = [
        MEDICATIONS_BY_ID[item] for item in medication_ids if item in MEDICATIONS_BY_ID
    ]
    results = []
    for first, second in combinations(known, 2):
        if _mentions(first, second) or _mentions(second, first):
            results.append(
                MedicationInteraction(
                    medication_a=first.id,
                    medication_b=second.id,
                    severity="Moderate",
                    description=(
                        f"Potential interaction between {first.name} and {second.name}"
                    ),
                    recommendation=INTERACTION_RECOMMENDATION,
                )
            )
        else:
            results.append(
                MedicationInteraction(
                    medication_a=first.id,
                    medication_b=second.id,
                    severity="None",
                    description="No known interaction",
                    recommendation="No special precautions needed",
                )
            )
    return results


def _mentions(medication: MedicationInfo, other: MedicationInfo) -> bool:
    names = (
        other.generic_name.lower(),
        *(brand.lower() for brand in other.brand_names),
        *other.interaction_terms,
    )
    return any(
        name in drug.lower() for drug in medication.interacting_drugs for name in names
    )


def generate_medication_reminders(
    medication_id: str, dosage: str, frequency: str, timing: str | None = None
) -> list[DoseReminder]:
    """Daily reminder times for a dosing schedule.

    Unknown medications and unsupported frequency/timing combinations
    produce no reminders.
    """
    medication = MEDICATIONS_BY_ID.get(medication_id)
    if medication is None:
        return []
    instruction = f"Take {medication.name} {dosage}"
    if frequency == "Once daily":
        time = ONCE_DAILY_TIMES.get(timing or "")
        if time is None:
            return []
        return [DoseReminder(time=time, instruction=instruction)]
    return [
        DoseReminder(
            time=time,
            instruction=f"{instruction} with {meal}" if meal else instruction,
        )
        for time, meal in FREQUENCY_SLOTS.get(frequency, ())
    ]
