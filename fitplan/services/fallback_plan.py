"""
Bundled plan served whenever a generated plan cannot be obtained.
"""
from fitplan.models.plan import FitnessPlan, PlanOrigin


FALLBACK_PLAN_DATA = {
    "workout_plan": [
        {
            "day": "Monday",
            "focus": "Full Body Power",
            "exercises": [
                {"name": "Barbell Squats", "sets": "4", "reps": "8-10", "tips": "Keep chest up and core tight"},
                {"name": "Bench Press", "sets": "3", "reps": "10", "tips": "Control the descent"},
                {"name": "Bent Over Rows", "sets": "3", "reps": "12", "tips": "Squeeze shoulder blades"},
                {"name": "Plank", "sets": "3", "reps": "60s", "tips": "Maintain straight line"}
            ]
        },
        {
            "day": "Tuesday",
            "focus": "Active Recovery",
            "exercises": [
                {"name": "Light Jogging", "sets": "1", "reps": "20 mins", "tips": "Keep comfortable pace"},
                {"name": "Stretching Routine", "sets": "1", "reps": "15 mins", "tips": "Focus on tight areas"}
            ]
        },
        {
            "day": "Wednesday",
            "focus": "Upper Body Strength",
            "exercises": [
                {"name": "Overhead Press", "sets": "3", "reps": "10", "tips": "Don't arch back"},
                {"name": "Pull Ups", "sets": "3", "reps": "Max", "tips": "Full range of motion"},
                {"name": "Dumbbell Curls", "sets": "3", "reps": "12", "tips": "Isolate biceps"}
            ]
        },
        {
            "day": "Thursday",
            "focus": "Rest Day",
            "exercises": [
                {"name": "Walking", "sets": "1", "reps": "30 mins", "tips": "Leisurely pace"}
            ]
        },
        {
            "day": "Friday",
            "focus": "Lower Body & Core",
            "exercises": [
                {"name": "Romanian Deadlifts", "sets": "3", "reps": "10", "tips": "Hinge at hips"},
                {"name": "Lunges", "sets": "3", "reps": "12/leg", "tips": "Knee shouldn't pass toe"},
                {"name": "Leg Raises", "sets": "3", "reps": "15", "tips": "Control movement"}
            ]
        },
        {
            "day": "Saturday",
            "focus": "Cardio & HIIT",
            "exercises": [
                {"name": "Burpees", "sets": "3", "reps": "10", "tips": "Explosive movement"},
                {"name": "Mountain Climbers", "sets": "3", "reps": "30s", "tips": "Keep hips low"},
                {"name": "Jump Rope", "sets": "3", "reps": "2 mins", "tips": "Stay on toes"}
            ]
        },
        {
            "day": "Sunday",
            "focus": "Rest & Prep",
            "exercises": [
                {"name": "Yoga", "sets": "1", "reps": "20 mins", "tips": "Relax and breathe"}
            ]
        }
    ],
    "diet_plan": [
        {
            "meal": "Breakfast",
            "food": "Oatmeal with Berries & Protein Shake",
            "calories": 450,
            "protein": "30g",
            "carbs": "50g",
            "fats": "10g"
        },
        {
            "meal": "Lunch",
            "food": "Grilled Chicken Salad with Quinoa",
            "calories": 600,
            "protein": "45g",
            "carbs": "40g",
            "fats": "20g"
        },
        {
            "meal": "Snack",
            "food": "Greek Yogurt & Almonds",
            "calories": 250,
            "protein": "15g",
            "carbs": "10g",
            "fats": "15g"
        },
        {
            "meal": "Dinner",
            "food": "Baked Salmon with Steamed Broccoli",
            "calories": 500,
            "protein": "40g",
            "carbs": "10g",
            "fats": "25g"
        }
    ],
    "summary": {
        "daily_calories": 2200,
        "macros": {"protein": "160g", "carbs": "200g", "fats": "80g"}
    }
}


def fallback_plan() -> FitnessPlan:
    """The bundled 7-day plan tagged with origin=fallback."""
    return FitnessPlan.model_validate({**FALLBACK_PLAN_DATA, "origin": PlanOrigin.FALLBACK})
