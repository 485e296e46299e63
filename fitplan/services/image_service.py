"""
Illustration URLs for exercises and meals (Pollinations image API).

No key or request is needed here: the prompt is encoded into a GET URL
that the client loads directly.
"""
from urllib.parse import quote

from fitplan.models.plan import FitnessPlan

POLLINATIONS_URL = "https://image.pollinations.ai/prompt/{prompt}?width=512&height=512&nologo=true"

CAMERA_SETTINGS = "shot on 85mm lens, f/1.8, soft studio lighting, sharp focus, 8k ultra-detailed"

IMAGE_KINDS = ("exercise", "meal")


def build_image_prompt(prompt: str, kind: str = "exercise", gender: str = "") -> str:
    """Photography prompt for an exercise or a meal."""
    if kind not in IMAGE_KINDS:
        raise ValueError(f"Unknown image kind '{kind}', expected one of {', '.join(IMAGE_KINDS)}")

    if kind == "exercise":
        gender_term = f"{gender} " if gender else ""
        return (
            f"ultra-realistic cinematic fitness photography of a {gender_term}athlete actively "
            f"performing the {prompt} exercise with textbook biomechanics and competition-level form, "
            "clearly defined joint alignment, neutral spine, engaged core, correct range of motion, "
            "mid-rep action phase, powerful athletic posture, modern professional gym environment, "
            "premium equipment, shallow depth of field, dramatic directional lighting, "
            f"high-speed DSLR sports photography, {CAMERA_SETTINGS}"
        )

    return (
        f"professional culinary photography of {prompt}, gourmet plating, macro shot, "
        "vibrant fresh ingredients, steam rising, shallow depth of field, softbox lighting, "
        f"appetizing textures, {CAMERA_SETTINGS}"
    )


def generate_image_url(prompt: str, kind: str = "exercise", gender: str = "") -> str:
    """
    Build the illustration URL for an exercise or meal.

    Args:
        prompt: Exercise or meal name
        kind: "exercise" or "meal"
        gender: Optional gender for exercise images

    Returns:
        Pollinations image URL
    """
    encoded = quote(build_image_prompt(prompt, kind, gender), safe="")
    return POLLINATIONS_URL.format(prompt=encoded)


def plan_image_urls(plan: FitnessPlan, gender: str = "") -> dict[str, dict[str, str]]:
    """Illustration URL for every exercise and meal in a plan."""
    exercises = {}
    for day in plan.workout_plan:
        for exercise in day.exercises:
            exercises.setdefault(exercise.name, generate_image_url(exercise.name, "exercise", gender))

    meals = {entry.food: generate_image_url(entry.food, "meal") for entry in plan.diet_plan}
    return {"exercises": exercises, "meals": meals}
