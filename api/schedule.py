from schemas.schedule.solve import (
    CheckRequest,
    CheckResponse,
    ScheduleRequest,
    ScheduleResponse,
)
from fastapi import APIRouter, HTTPException
from scheduler.builder import build_schedule
from scheduler.extractor import check_assignment
from utils.validate import validate_constraints
from exceptions.custom_errors import *
import traceback
import logging
from docs.schedule.solve import schedule_solve_description, schedule_check_description

router = APIRouter(prefix="/schedule", tags=["Meetings"])


# solve schedule
@router.post(
    "/solve",
    response_model=ScheduleResponse,
    description=schedule_solve_description,
    summary="Solve Meeting Schedule",
)
def solve_schedule(request: ScheduleRequest):
    try:
        constraints = [c.to_constraint() for c in request.constraints]

        logging.info("=== API inputs for build_schedule ===")
        logging.info("numMeetings:               %d", request.numMeetings)
        logging.info("startDate:                 %s", request.startDate)
        logging.info("endDate:                   %s", request.endDate)
        logging.info("constraints:               %d", len(constraints))
        logging.info("engine:                    %s", request.engine)
        logging.info("propagation:               %s", request.propagation)
        logging.info("maxNodes:                  %s", request.maxNodes)

        schedule, metrics = build_schedule(
            n_meetings=request.numMeetings,
            range_start=request.startDate,
            range_end=request.endDate,
            constraints=constraints,
            engine=request.engine,
            propagation=request.propagation,
            max_nodes=request.maxNodes,
        )

        # Convert DataFrames to JSON-friendly format
        return {
            "schedule": schedule.to_dict(orient="records"),
            "metrics": metrics,
        }

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")


# check a proposed schedule
@router.post(
    "/check",
    response_model=CheckResponse,
    description=schedule_check_description,
    summary="Check Meeting Schedule",
)
def check_schedule(request: CheckRequest):
    try:
        constraints = validate_constraints(
            [c.to_constraint() for c in request.constraints], request.numMeetings
        )
        violations = check_assignment(request.schedule, constraints)
        return {"valid": not violations, "violations": violations}

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
