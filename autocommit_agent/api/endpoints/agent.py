from typing import Annotated, Any, Dict
from fastapi import APIRouter, Body, Depends, HTTPException

from autocommit_agent.dependencies.database import get_runner
from autocommit_agent.services.autocommit import AgentRunner
from autocommit_agent.services.autocommit.options import (
    default_options,
    validate_options,
)

router = APIRouter()

RunnerDep = Annotated[AgentRunner, Depends(get_runner)]


@router.post("/check")
async def run_check(runner: RunnerDep):
    """Run one scheduled check right now."""
    try:
        events = await runner.run_check()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Check failed: {str(e)}") from e
    return {"message": "Check done", "events": events}


@router.post("/dry-run")
async def dry_run(runner: RunnerDep, options: Dict[str, Any] = Body(...)):
    """
    Run once with the given options without storing events or logs.

    GitHub is called for real, including the commit.
    """
    options = {**default_options(), **options}
    errors = validate_options(options)
    if errors:
        raise HTTPException(status_code=422, detail=errors)

    recorder = await runner.dry_run(options)
    return {
        "events": recorder.events,
        "logs": [
            {"message": record.message, "level": int(record.level)}
            for record in recorder.logs
        ],
    }


@router.post("/options/validate")
def validate(options: Dict[str, Any] = Body(...)):
    """Validate agent options; returns every error found."""
    errors = validate_options({**default_options(), **options})
    return {"valid": not errors, "errors": errors}
