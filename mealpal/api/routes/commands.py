import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from mealpal.api.http_errors import to_http
from mealpal.logic.commands.dispatcher import CommandDispatcher
from mealpal.logic.commands.interpreter import get_interpreter
from mealpal.utilities.errors import CommandNotRecognized, MealPalError
from mealpal.utilities.validators import CommandInput

router = APIRouter(prefix="/api/command", tags=["commands"])
logger = logging.getLogger(__name__)


def _not_recognized(e: CommandNotRecognized) -> JSONResponse:
    interpreter = get_interpreter()
    suggestions = interpreter.get_suggestions(e.command) or list(interpreter.vocabulary.general_hints)
    return JSONResponse(status_code=400, content={"error": str(e), "suggestions": suggestions})


@router.post("")
def run_command(body: CommandInput):
    """Interpret a free-text command and execute it."""
    try:
        intent = get_interpreter().interpret(body.command)
    except CommandNotRecognized as e:
        return _not_recognized(e)
    try:
        result = CommandDispatcher().execute(intent)
    except MealPalError as e:
        raise to_http(e)
    except RuntimeError as e:
        logger.exception("Dispatch failed for %r", body.command)
        raise HTTPException(status_code=500, detail=str(e))
    return {"intent": intent.model_dump(mode="json"), "result": result}


@router.post("/interpret")
def interpret_command(body: CommandInput):
    """Interpret only; nothing is changed."""
    try:
        intent = get_interpreter().interpret(body.command)
    except CommandNotRecognized as e:
        return _not_recognized(e)
    return intent.model_dump(mode="json")
