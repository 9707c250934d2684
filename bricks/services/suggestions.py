"""Deterministic workout suggestion. No model inference is involved."""

OBJECTIVE_TITLES = {
    "weight_loss": "Weight Loss",
    "hypertrophy": "Hypertrophy",
}

MEAL_PLAN = """**Suggested meal plan for {goal}**

**Breakfast (7am)**
- 2 scrambled eggs
- 1 slice of wholegrain bread
- 1 fruit (banana or apple)

**Morning snack (10am)**
- 1 natural yoghurt
- 1 handful of nuts

**Lunch (12:30pm)**
- 150g grilled chicken or fish
- 4 spoons of brown rice
- Green salad

**Afternoon snack (3:30pm)**
- 1 protein shake
- 1 fruit

**Dinner (7pm)**
- 150g lean protein
- Sauteed vegetables

*Drink at least 2L of water per day*"""

SUPPLEMENTS = """**Suggested supplements**

1. **Whey Protein** - 1 scoop (30g) after training
2. **Creatine** - 5g daily
3. **BCAA** - during training
4. **Omega 3** - 2 capsules per day
5. **Multivitamin** - 1 capsule in the morning

*Check with a nutritionist before changing your diet*"""


def suggest_workout(objective, level, frequency, session_time, equipment=(),
                    restrictions=None, include_meal_plan=False, include_supplements=False):
    row_equipment = "Dumbbell" if "dumbbells" in [e.lower() for e in equipment] else "Bodyweight"
    exercises = [
        {"exercise_name": "Bodyweight Squat", "muscle_group": "Legs", "equipment": "Bodyweight",
         "sets": 4, "reps": 12, "rest_time_seconds": 60, "observations": "Keep a neutral spine"},
        {"exercise_name": "Push-up", "muscle_group": "Chest", "equipment": "Bodyweight",
         "sets": 3, "reps": 15, "rest_time_seconds": 45, "observations": "Elbows close to the body"},
        {"exercise_name": "Bent-over Row", "muscle_group": "Back", "equipment": row_equipment,
         "sets": 4, "reps": 10, "rest_time_seconds": 60, "observations": None},
        {"exercise_name": "Plank", "muscle_group": "Core", "equipment": "Bodyweight",
         "sets": 3, "time_in_seconds": 45, "rest_time_seconds": 30, "observations": "Brace the abs"},
        {"exercise_name": "Lunge", "muscle_group": "Legs", "equipment": "Bodyweight",
         "sets": 3, "reps": 12, "rest_time_seconds": 45, "observations": "Alternate legs"},
    ]
    for index, exercise in enumerate(exercises):
        exercise["order_index"] = index

    result = {
        "workout": {
            "name": f"{OBJECTIVE_TITLES.get(objective, 'Conditioning')} Workout - AI",
            "objective": objective,
            "level": level,
            "frequency": frequency,
            "duration": session_time,
            "restrictions": restrictions,
            "exercises": exercises,
        }
    }
    if include_meal_plan:
        goal = "weight loss" if objective == "weight_loss" else "muscle gain"
        result["meal_plan"] = MEAL_PLAN.format(goal=goal)
    if include_supplements:
        result["supplements"] = SUPPLEMENTS
    return result
