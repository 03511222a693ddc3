import logging
from sqlalchemy.orm import Session
from models.audit_mixin import now_local
from models.press_run import PressRun
from schemas.press_run import PressRunCreate, PressRunComplete
from utils import calculate_expected_tablet_count

logger = logging.getLogger(__name__)

COMPLETION_FIELDS = ("final_weight", "loss_weight")


def get_press_run(db: Session, press_run_id: int):
    return db.query(PressRun).filter(PressRun.id == press_run_id).first()


def get_press_runs(db: Session):
    return db.query(PressRun).order_by(PressRun.created_at.desc(), PressRun.id.desc()).all()


def create_press_run(db: Session, press_run: PressRunCreate):
    """
    Start a press run against a batch.

    The expected tablet count is fixed here from the received and tablet
    weights. The batch reference is not checked beyond the foreign key.
    """
    expected = calculate_expected_tablet_count(press_run.received_weight, press_run.tablet_weight)
    db_press_run = PressRun(
        batch_id=press_run.batch_id,
        received_weight=press_run.received_weight,
        tablet_weight=press_run.tablet_weight,
        expected_tablet_count=expected,
    )
    db.add(db_press_run)
    db.commit()
    db.refresh(db_press_run)
    logger.info("Created press run id=%s for batch_id=%s, expected_tablet_count=%s",
                db_press_run.id, press_run.batch_id, expected)
    return db_press_run


def complete_press_run(db: Session, press_run_id: int, completion: PressRunComplete):
    """Record final and loss weights. Returns None when the press run does not exist."""
    db_press_run = get_press_run(db, press_run_id)
    if db_press_run is None:
        return None
    for field in COMPLETION_FIELDS:
        if field in completion.model_fields_set:
            setattr(db_press_run, field, getattr(completion, field))
    db_press_run.updated_at = now_local()
    db.commit()
    db.refresh(db_press_run)
    logger.info("Completed press run id=%s final_weight=%s loss_weight=%s",
                press_run_id, db_press_run.final_weight, db_press_run.loss_weight)
    return db_press_run
