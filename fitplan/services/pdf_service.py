"""
PDF export service - render a plan into a printable document.
"""
import textwrap

import fitz  # PyMuPDF

from fitplan.core.logger import logger
from fitplan.models.plan import FitnessPlan


# A4 in points
PAGE_WIDTH = 595
PAGE_HEIGHT = 842
MARGIN = 50
LINE_HEIGHT = 16
WRAP_WIDTH = 90


def plan_lines(plan: FitnessPlan, title: str = "Your 7-Day Fitness Plan") -> list[tuple[str, float]]:
    """
    Flatten a plan into (text, fontsize) lines in reading order.

    Args:
        plan: Plan to export
        title: Document heading

    Returns:
        Lines with their font sizes
    """
    macros = plan.summary.macros
    lines = [
        (title, 18),
        ("", 11),
        (f"Daily calories: {plan.summary.daily_calories} kcal", 11),
        (f"Macros: protein {macros.protein}, carbs {macros.carbs}, fats {macros.fats}", 11),
    ]
    if plan.is_fallback:
        lines.append(("Note: standard plan shown, a personalised plan could not be generated.", 9))

    lines += [("", 11), ("Workout Plan", 14)]
    for day in plan.workout_plan:
        lines.append((f"{day.day} - {day.focus}", 12))
        for ex in day.exercises:
            lines.append((f"  {ex.name}: {ex.sets} x {ex.reps}. {ex.tips}", 10))

    lines += [("", 11), ("Diet Plan", 14)]
    for entry in plan.diet_plan:
        lines.append((
            f"{entry.meal}: {entry.food} ({entry.calories} kcal, "
            f"P {entry.protein} / C {entry.carbs} / F {entry.fats})",
            10,
        ))
    return lines


def plan_to_pdf(plan: FitnessPlan, title: str = "Your 7-Day Fitness Plan") -> bytes:
    """
    Render a plan to PDF bytes, adding pages as text overflows.

    Args:
        plan: Plan to export
        title: Document heading

    Returns:
        PDF file content
    """
    doc = fitz.open()
    page = doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
    y = MARGIN

    for text, fontsize in plan_lines(plan, title):
        for chunk in textwrap.wrap(text, WRAP_WIDTH) or [""]:
            if y > PAGE_HEIGHT - MARGIN:
                page = doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
                y = MARGIN
            page.insert_text((MARGIN, y), chunk, fontsize=fontsize, fontname="helv")
            y += max(LINE_HEIGHT, fontsize + 4)

    pages = doc.page_count
    content = doc.tobytes()
    doc.close()
    logger.info(f"Exported plan to PDF ({pages} pages, {len(content)} bytes)")
    return content
