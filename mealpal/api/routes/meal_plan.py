from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from mealpal.api.http_errors import to_http
from mealpal.infra.Plan_Repository import PlanRepository
from mealpal.logic.recipes.service import RecipeService
from mealpal.logic.suggestions.service import generate_meal_plan
from mealpal.utilities.errors import MealPalError
from mealpal.utilities.validators import GeneratePlanInput, PlanEntryInput

router = APIRouter(prefix="/api/meal-plan", tags=["meal-plan"])


def _week_or_current(week: Optional[int], year: Optional[int]):
    iso = date.today().isocalendar()
    return week or iso.week, year or iso.year


@router.get("/week")
def get_week(week: Optional[int] = Query(default=None, ge=1, le=53), year: Optional[int] = Query(default=None)):
    week, year = _week_or_current(week, year)
    try:
        return PlanRepository().get_week_plan(week, year).to_dict()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/week/reset")
def reset_week(week: Optional[int] = Query(default=None, ge=1, le=53), year: Optional[int] = Query(default=None)):
    """Clear today and the remaining days of the week."""
    week, year = _week_or_current(week, year)
    try:
        cleared = PlanRepository().reset_week(week, year)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"week": week, "year": year, "cleared_days": cleared}


@router.post("/generate")
def generate_plan(body: Optional[GeneratePlanInput] = None):
    """Plan the coming days from suggestions built on the current inventory."""
    body = body or GeneratePlanInput()
    try:
        return generate_meal_plan(start=body.start_date, days=body.days)
    except MealPalError as e:
        raise to_http(e)


@router.get("/{day}")
def get_day(day: date):
    return {"date": day.isoformat(), "recipes": PlanRepository().get_day(day)}


@router.post("/{day}")
def plan_recipe(day: date, body: PlanEntryInput):
    try:
        recipe = RecipeService().find_by_name(body.name)
    except MealPalError as e:
        raise to_http(e)
    return {"date": day.isoformat(), "recipes": PlanRepository().plan_recipe(recipe.name, day)}


@router.delete("/{day}")
def remove_planned_recipe(day: date, name: str = Query(..., min_length=1)):
    repo = PlanRepository()
    if not repo.remove_recipe(name, day):
        raise HTTPException(status_code=404, detail="Recipe not planned for this day")
    return {"date": day.isoformat(), "recipes": repo.get_day(day)}
