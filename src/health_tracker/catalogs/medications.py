"""Reference database of common medications."""

from health_tracker.domain.catalog import MedicationInfo

MEDICATION_CATEGORIES = (
    "Cardiovascular",
    "Endocrine",
    "Mental Health",
    "Pain/Inflammation",
    "Respiratory",
    "Gastrointestinal",
    "Allergy",
)

MEDICATIONS: tuple[MedicationInfo, ...] = (
    MedicationInfo(
        id="lisinopril",
        name="Lisinopril",
        generic_name="lisinopril",
        brand_names=("Prinivil", "Zestril"),
        drug_class="ACE Inhibitor",
        category="Cardiovascular",
        description=(
            "Angiotensin-converting enzyme (ACE) inhibitor that helps relax "
            "blood vessels"
        ),
        used_for=(
            "Hypertension (high blood pressure)",
            "Heart failure",
            "Post-heart attack recovery",
            "Diabetic kidney disease",
        ),
        dosage_forms=("Tablet", "Oral solution"),
        typical_dosage="10-40 mg once daily",
        common_side_effects=("Dry cough", "Dizziness", "Headache", "Fatigue", "Nausea"),
        serious_side_effects=(
            "Angioedema (swelling of face, lips, tongue)",
            "Hyperkalemia (high potassium levels)",
            "Decreased kidney function",
            "Low blood pressure",
            "Allergic reactions",
        ),
        interacting_drugs=(
            "Potassium supplements",
            "Potassium-sparing diuretics",
            "NSAIDs",
            "Lithium",
        ),
        interacting_foods=("Salt substitutes containing potassium",),
        interacting_conditions=("Pregnancy", "Kidney disease", "Liver disease"),
        precautions=(
            "Monitor kidney function",
            "Check potassium levels",
            "May cause dizziness when standing up quickly",
        ),
        contraindications=(
            "History of angioedema with ACE inhibitors",
            "Pregnancy (2nd and 3rd trimesters)",
            "Bilateral renal artery stenosis",
        ),
        pregnancy_category="D",
        mechanism=(
            "Blocks the conversion of angiotensin I to angiotensin II, "
            "reducing blood pressure"
        ),
        half_life="12 hours",
        requires_prescription=True,
        interaction_terms=("ace inhibitor",),
    ),
    MedicationInfo(
        id="atorvastatin",
        name="Atorvastatin",
        generic_name="atorvastatin",
        brand_names=("Lipitor",),
        drug_class="Statin",
        category="Cardiovascular",
        description="HMG-CoA reductase inhibitor that lowers cholesterol levels",
        used_for=(
            "High cholesterol",
            "Cardiovascular disease prevention",
            "Coronary artery disease",
            "Stroke prevention",
        ),
        dosage_forms=("Tablet",),
        typical_dosage="10-80 mg once daily",
        common_side_effects=(
            "Muscle pain",
            "Joint pain",
            "Diarrhea",
            "Nausea",
            "Constipation",
        ),
        serious_side_effects=(
            "Rhabdomyolysis (severe muscle breakdown)",
            "Liver damage",
            "Increased blood sugar",
            "Memory problems",
            "Allergic reactions",
        ),
        interacting_drugs=(
            "Cyclosporine",
            "Erythromycin",
            "Clarithromycin",
            "Protease inhibitors",
            "Fibrates",
        ),
        interacting_foods=("Grapefruit juice",),
        interacting_conditions=("Liver disease", "Kidney disease", "Hypothyroidism"),
        precautions=(
            "Monitor liver function",
            "Report unexplained muscle pain",
            "Avoid excessive alcohol",
        ),
        contraindications=("Active liver disease", "Pregnancy", "Breastfeeding"),
        pregnancy_category="X",
        mechanism=(
            "Inhibits HMG-CoA reductase, reducing cholesterol production in "
            "the liver"
        ),
        half_life="14 hours",
        requires_prescription=True,
        interaction_terms=("statin",),
    ),
    MedicationInfo(
        id="metoprolol",
        name="Metoprolol",
        generic_name="metoprolol",
        brand_names=("Lopressor", "Toprol XL"),
        drug_class="Beta Blocker",
        category="Cardiovascular",
        description=(
            "Beta-1 selective blocker that reduces heart rate and blood pressure"
        ),
        used_for=(
            "Hypertension",
            "Angina",
            "Heart failure",
            "Heart attack recovery",
            "Atrial fibrillation",
            "Migraine prevention",
        ),
        dosage_forms=("Tablet", "Extended-release tablet", "Injectable"),
        typical_dosage="25-200 mg daily (varies by condition)",
        common_side_effects=(
            "Fatigue",
            "Dizziness",
            "Slow heart rate",
            "Cold hands and feet",
            "Shortness of breath",
        ),
        serious_side_effects=(
            "Severe bradycardia (slow heart rate)",
            "Heart block",
            "Hypotension",
            "Worsening heart failure",
            "Bronchospasm",
        ),
        interacting_drugs=(
            "Calcium channel blockers",
            "Antiarrhythmics",
            "Insulin",
            "Oral diabetes medications",
            "Digoxin",
        ),
        interacting_conditions=(
            "Asthma",
            "COPD",
            "Diabetes",
            "Peripheral vascular disease",
        ),
        precautions=(
            "Don't stop suddenly (can cause rebound hypertension)",
            "Monitor heart rate and blood pressure",
            "May mask symptoms of hypoglycemia in diabetics",
        ),
        contraindications=(
            "Severe bradycardia",
            "Heart block",
            "Cardiogenic shock",
            "Severe COPD or asthma",
        ),
        pregnancy_category="C",
        requires_prescription=True,
        interaction_terms=("beta-blocker", "beta blocker"),
    ),
    MedicationInfo(
        id="metformin",
        name="Metformin",
        generic_name="metformin",
        brand_names=("Glucophage", "Glumetza", "Riomet"),
        drug_class="Biguanide",
        category="Endocrine",
        description="Oral diabetes medication that reduces blood sugar production",
        used_for=(
            "Type 2 diabetes",
            "Prediabetes",
            "Polycystic ovary syndrome (PCOS)",
            "Insulin resistance",
        ),
        dosage_forms=("Tablet", "Extended-release tablet", "Oral solution"),
        typical_dosage="500-2000 mg daily, divided into 2-3 doses",
        common_side_effects=(
            "Diarrhea",
            "Nausea",
            "Stomach upset",
            "Metallic taste",
            "Vitamin B12 deficiency",
        ),
        serious_side_effects=(
            "Lactic acidosis (rare but serious)",
            "Hypoglycemia (when combined with other diabetes medications)",
            "Allergic reactions",
        ),
        interacting_drugs=(
            "Contrast dyes used for imaging studies",
            "Certain antibiotics",
            "Corticosteroids",
            "Diuretics",
        ),
        interacting_conditions=(
            "Kidney disease",
            "Liver disease",
            "Heart failure",
            "Alcohol use disorder",
        ),
        precautions=(
            "Take with meals to reduce GI side effects",
            "Monitor kidney function",
            "Temporarily stop before surgery or imaging with contrast",
            "Avoid excessive alcohol",
        ),
        contraindications=(
            "Severe kidney disease",
            "Metabolic acidosis",
            "Severe infection",
            "Dehydration",
        ),
        pregnancy_category="B",
        mechanism=(
            "Decreases glucose production in the liver and improves insulin "
            "sensitivity"
        ),
        half_life="6.2 hours",
        requires_prescription=True,
        interaction_terms=("oral diabetes",),
    ),
    MedicationInfo(
        id="insulin-glargine",
        name="Insulin Glargine",
        generic_name="insulin glargine",
        brand_names=("Lantus", "Toujeo", "Basaglar"),
        drug_class="Long-acting Insulin",
        category="Endocrine",
        description="Long-acting insulin analog for blood sugar control",
        used_for=("Type 1 diabetes", "Type 2 diabetes"),
        dosage_forms=("Injectable solution",),
        typical_dosage="Individualized based on blood glucose levels",
        common_side_effects=(
            "Hypoglycemia",
            "Injection site reactions",
            "Weight gain",
            "Lipodystrophy",
        ),
        serious_side_effects=(
            "Severe hypoglycemia",
            "Allergic reactions",
            "Hypokalemia",
        ),
        interacting_drugs=(
            "Beta-blockers",
            "ACE inhibitors",
            "Salicylates",
            "Alcohol",
            "Thiazolidinediones",
        ),
        interacting_conditions=("Kidney disease", "Liver disease"),
        precautions=(
            "Regular blood glucose monitoring",
            "Rotate injection sites",
            "Adjust dose with changes in physical activity",
            "Adjust dose with illness",
        ),
        contraindications=("Hypoglycemia", "Hypersensitivity to insulin glargine"),
        pregnancy_category="B",
        mechanism="Replaces natural insulin to regulate blood glucose",
        requires_prescription=True,
        interaction_terms=("insulin",),
    ),
    MedicationInfo(
        id="sertraline",
        name="Sertraline",
        generic_name="sertraline",
        brand_names=("Zoloft",),
        drug_class="SSRI (Selective Serotonin Reuptake Inhibitor)",
        category="Mental Health",
        description="Antidepressant that increases serotonin levels in the brain",
        used_for=(
            "Major depressive disorder",
            "Generalized anxiety disorder",
            "Panic disorder",
            "Post-traumatic stress disorder (PTSD)",
            "Obsessive-compulsive disorder (OCD)",
            "Social anxiety disorder",
            "Premenstrual dysphoric disorder (PMDD)",
        ),
        dosage_forms=("Tablet", "Oral solution"),
        typical_dosage="50-200 mg once daily",
        common_side_effects=(
            "Nausea",
            "Diarrhea",
            "Insomnia",
            "Drowsiness",
            "Dry mouth",
            "Dizziness",
            "Sexual dysfunction",
            "Headache",
        ),
        serious_side_effects=(
            "Serotonin syndrome",
            "Increased suicidal thoughts (especially in young adults)",
            "Abnormal bleeding",
            "Hyponatremia",
            "Seizures",
        ),
        interacting_drugs=(
            "MAOIs",
            "Other antidepressants",
            "Triptans",
            "Tramadol",
            "St. John's Wort",
            "NSAIDs",
            "Warfarin",
        ),
        interacting_conditions=(
            "Liver disease",
            "Seizure disorders",
            "Bipolar disorder",
            "Bleeding disorders",
        ),
        precautions=(
            "May take 2-4 weeks for full effect",
            "Don't stop suddenly (withdrawal risk)",
            "Monitor for worsening depression or suicidal thoughts",
            "Use caution when driving or operating machinery",
        ),
        contraindications=(
            "Use of MAOIs within 14 days",
            "Taking pimozide",
            "Hypersensitivity to sertraline",
        ),
        pregnancy_category="C",
        mechanism="Inhibits serotonin reuptake in the central nervous system",
        half_life="26 hours",
        requires_prescription=True,
        interaction_terms=("antidepressant",),
    ),
    MedicationInfo(
        id="ibuprofen",
        name="Ibuprofen",
        generic_name="ibuprofen",
        brand_names=("Advil", "Motrin", "Nurofen"),
        drug_class="NSAID (Nonsteroidal Anti-inflammatory Drug)",
        category="Pain/Inflammation",
        description="Anti-inflammatory medication that reduces pain and inflammation",
        used_for=(
            "Pain relief",
            "Fever reduction",
            "Inflammation",
            "Menstrual cramps",
            "Arthritis",
            "Headaches",
            "Muscle aches",
        ),
        dosage_forms=(
            "Tablet",
            "Capsule",
            "Liquid gel",
            "Oral suspension",
            "Topical gel",
        ),
        typical_dosage="200-800 mg every 4-6 hours as needed (max 3200 mg/day)",
        common_side_effects=(
            "Stomach upset",
            "Heartburn",
            "Nausea",
            "Dizziness",
            "Mild headache",
            "Rash",
        ),
        serious_side_effects=(
            "Gastrointestinal bleeding",
            "Ulcers",
            "Kidney problems",
            "Increased risk of heart attack and stroke",
            "Allergic reactions",
            "Liver damage",
        ),
        interacting_drugs=(
            "Aspirin",
            "Blood thinners",
            "Other NSAIDs",
            "Diuretics",
            "ACE inhibitors",
            "Lithium",
            "Methotrexate",
        ),
        interacting_conditions=(
            "Heart disease",
            "High blood pressure",
            "Kidney disease",
            "Liver disease",
            "Asthma",
            "Bleeding disorders",
            "Stomach ulcers",
        ),
        precautions=(
            "Take with food to reduce stomach upset",
            "Use lowest effective dose for shortest duration",
            "Increased risk of heart attack and stroke",
            "Not recommended for long-term use without medical supervision",
        ),
        contraindications=(
            "Allergy to NSAIDs",
            "Active peptic ulcer disease",
            "Severe kidney disease",
            "Third trimester of pregnancy",
        ),
        pregnancy_category="C",
        mechanism=(
            "Inhibits cyclooxygenase (COX) enzymes, reducing prostaglandin "
            "synthesis"
        ),
        half_life="1.8-2 hours",
        requires_prescription=False,
        interaction_terms=("nsaid",),
    ),
    MedicationInfo(
        id="acetaminophen",
        name="Acetaminophen",
        generic_name="acetaminophen",
        brand_names=("Tylenol",),
        drug_class="Analgesic/Antipyretic",
        category="Pain/Inflammation",
        description="Pain reliever and fever reducer",
        used_for=(
            "Pain relief",
            "Fever reduction",
            "Headaches",
            "Muscle aches",
            "Arthritis",
            "Cold and flu symptoms",
        ),
        dosage_forms=("Tablet", "Capsule", "Liquid", "Suppository"),
        typical_dosage="325-650 mg every 4-6 hours as needed (max 3000 mg/day)",
        common_side_effects=("Few side effects when taken as directed",),
        serious_side_effects=(
            "Liver damage (with overdose or chronic use)",
            "Allergic reactions",
            "Rare blood disorders",
        ),
        interacting_drugs=(
            "Alcohol",
            "Warfarin",
            "Isoniazid",
            "Carbamazepine",
            "Phenytoin",
        ),
        interacting_conditions=("Liver disease", "Alcohol use disorder"),
        precautions=(
            "Do not exceed recommended dose",
            "Avoid alcohol while taking",
            "Check other medications for acetaminophen to avoid double-dosing",
            "Use caution in liver disease",
        ),
        contraindications=(
            "Severe liver disease",
            "Hypersensitivity to acetaminophen",
        ),
        pregnancy_category="B",
        mechanism=(
            "Exact mechanism unknown; believed to inhibit prostaglandin "
            "synthesis in the central nervous system"
        ),
        half_life="1.5-3 hours",
        requires_prescription=False,
    ),
    MedicationInfo(
        id="albuterol",
        name="Albuterol",
        generic_name="albuterol",
        brand_names=("ProAir", "Ventolin", "Proventil"),
        drug_class="Short-acting Beta-2 Agonist",
        category="Respiratory",
        description="Bronchodilator that relaxes muscles in the airways",
        used_for=(
            "Asthma",
            "COPD (Chronic Obstructive Pulmonary Disease)",
            "Exercise-induced bronchospasm",
            "Bronchitis",
        ),
        dosage_forms=("Inhaler", "Nebulizer solution", "Tablet", "Syrup"),
        typical_dosage="2 inhalations every 4-6 hours as needed",
        common_side_effects=(
            "Tremor",
            "Nervousness",
            "Headache",
            "Throat irritation",
            "Rapid heart rate",
            "Muscle cramps",
        ),
        serious_side_effects=(
            "Severe paradoxical bronchospasm",
            "Cardiovascular effects",
            "Hypokalemia",
            "Seizures",
            "Allergic reactions",
        ),
        interacting_drugs=(
            "Beta-blockers",
            "Diuretics",
            "Digoxin",
            "Other stimulants",
            "MAOIs",
            "Tricyclic antidepressants",
        ),
        interacting_conditions=(
            "Heart disease",
            "High blood pressure",
            "Diabetes",
            "Thyroid disorders",
            "Seizure disorders",
        ),
        precautions=(
            "Use only as needed",
            "Increasing use may indicate worsening asthma",
            "Monitor heart rate and blood pressure",
            "May cause paradoxical bronchospasm",
        ),
        contraindications=("Hypersensitivity to albuterol", "Severe tachycardia"),
        pregnancy_category="C",
        mechanism="Stimulates beta-2 receptors in the lungs, causing bronchodilation",
        half_life="5-6 hours",
        requires_prescription=True,
        interaction_terms=("stimulant",),
    ),
    MedicationInfo(
        id="omeprazole",
        name="Omeprazole",
        generic_name="omeprazole",
        brand_names=("Prilosec", "Losec"),
        drug_class="Proton Pump Inhibitor (PPI)",
        category="Gastrointestinal",
        description="Reduces stomach acid production",
        used_for=(
            "Gastroesophageal reflux disease (GERD)",
            "Peptic ulcer disease",
            "Erosive esophagitis",
            "Zollinger-Ellison syndrome",
            "H. pylori infection (as part of combination therapy)",
        ),
        dosage_forms=("Capsule", "Tablet", "Powder for suspension"),
        typical_dosage="20-40 mg once daily",
        common_side_effects=(
            "Headache",
            "Nausea",
            "Diarrhea",
            "Abdominal pain",
            "Constipation",
            "Flatulence",
        ),
        serious_side_effects=(
            "Vitamin B12 deficiency",
            "Magnesium deficiency",
            "Increased risk of fractures",
            "Clostridium difficile infection",
            "Kidney disease",
            "Increased risk of pneumonia",
        ),
        interacting_drugs=(
            "Clopidogrel",
            "Diazepam",
            "Phenytoin",
            "Warfarin",
            "Cilostazol",
            "Methotrexate",
        ),
        interacting_conditions=(
            "Osteoporosis",
            "Vitamin B12 deficiency",
            "Kidney disease",
        ),
        precautions=(
            "Take before meals",
            "Long-term use may increase risk of fractures",
            "May mask symptoms of gastric cancer",
            "Monitor for vitamin B12 deficiency with long-term use",
        ),
        contraindications=(
            "Hypersensitivity to omeprazole or other PPIs",
            "Concurrent use with rilpivirine",
        ),
        pregnancy_category="C",
        mechanism=(
            "Inhibits the hydrogen-potassium ATPase enzyme system in gastric "
            "parietal cells"
        ),
        half_life="0.5-1.5 hours",
        requires_prescription=False,
    ),
    MedicationInfo(
        id="cetirizine",
        name="Cetirizine",
        generic_name="cetirizine",
        brand_names=("Zyrtec", "Reactine"),
        drug_class="Second-generation Antihistamine",
        category="Allergy",
        description="Antihistamine that reduces allergy symptoms",
        used_for=(
            "Seasonal allergies",
            "Perennial allergies",
            "Hay fever",
            "Hives",
            "Itching",
        ),
        dosage_forms=("Tablet", "Chewable tablet", "Oral solution"),
        typical_dosage="5-10 mg once daily",
        common_side_effects=(
            "Drowsiness",
            "Dry mouth",
            "Fatigue",
            "Headache",
            "Sore throat",
        ),
        serious_side_effects=(
            "Allergic reactions",
            "Urinary retention",
            "Vision changes",
        ),
        interacting_drugs=("CNS depressants", "Alcohol", "Theophylline"),
        interacting_conditions=("Liver disease", "Kidney disease"),
        precautions=(
            "May cause drowsiness",
            "Use caution when driving or operating machinery",
            "Avoid alcohol",
        ),
        contraindications=(
            "Hypersensitivity to cetirizine",
            "Severe kidney disease",
        ),
        pregnancy_category="B",
        mechanism="Blocks H1 histamine receptors, reducing allergic symptoms",
        half_life="8-9 hours",
        requires_prescription=False,
    ),
)

MEDICATIONS_BY_ID: dict[str, MedicationInfo] = {item.id: item for item in MEDICATIONS}
