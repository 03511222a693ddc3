from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
import crud.press_run as crud_press_run
from schemas.press_run import PressRun, PressRunComplete, PressRunCreate, PressRunCreated
from schemas.batch_item import UpdatedCount

router = APIRouter(prefix="/api/press", tags=["Press"])
logger = logging.getLogger(__name__)


@router.post("", response_model=PressRunCreated, status_code=status.HTTP_201_CREATED)
def create_press_run(press_run: PressRunCreate, db: Session = Depends(get_db)):
    db_press_run = crud_press_run.create_press_run(db, press_run)
    return {"id": db_press_run.id, "expected_tablet_count": db_press_run.expected_tablet_count}


@router.get("", response_model=List[PressRun])
def read_press_runs(db: Session = Depends(get_db)):
    return crud_press_run.get_press_runs(db)


@router.patch("/{press_run_id}/complete", response_model=UpdatedCount)
def complete_press_run(press_run_id: int, completion: Optional[PressRunComplete] = None, db: Session = Depends(get_db)):
    """Record final and loss weights. An empty body only bumps updated_at."""
    db_press_run = crud_press_run.complete_press_run(db, press_run_id, completion or PressRunComplete())
    if db_press_run is None:
        logger.warning("Press run with id=%d not found", press_run_id)
        raise HTTPException(status_code=404, detail="press run not found")
    return {"updated": 1}
