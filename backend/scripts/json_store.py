"""
Move data between the relational database and the flat JSON document store.

The document store keeps one JSON object with six top-level arrays
(skus, recipes, recipe_items, batches, batch_items, press_runs) holding
plain records. ``import`` loads such a file into an empty database keeping
every id; ``export`` writes the database back out in the same shape.

Usage:
    python scripts/json_store.py import data/production.json [--force]
    python scripts/json_store.py export backup.json
"""

import argparse
import json
import logging
import os
import sys

from dotenv import load_dotenv
from dateutil import parser as date_parser
from sqlalchemy import text

load_dotenv()

# Add the parent directory to sys.path to allow imports from backend
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import Base, SessionLocal, engine, SQLALCHEMY_DATABASE_URL, ensure_sqlite_directory
from models.audit_mixin import now_local
from models.batch import Batch, STATUS_PENDING
from models.batch_item import BatchItem
from models.press_run import PressRun
from models.recipe import Recipe
from models.recipe_item import RecipeItem, DEFAULT_UNIT
from models.sku import Sku
from utils import sqlalchemy_to_dict

logger = logging.getLogger("json_store")

# Parents before children so foreign keys resolve
COLLECTIONS = [
    ("skus", Sku),
    ("recipes", Recipe),
    ("recipe_items", RecipeItem),
    ("batches", Batch),
    ("batch_items", BatchItem),
    ("press_runs", PressRun),
]

TIMESTAMP_FIELDS = ("created_at", "updated_at")


def _parse_timestamp(value):
    if not value:
        return now_local()
    return date_parser.isoparse(value)


def _record_to_row(model, record: dict) -> dict:
    columns = {c.key for c in model.__table__.columns}
    row = {key: value for key, value in record.items() if key in columns}
    for field in TIMESTAMP_FIELDS:
        if field in columns:
            row[field] = _parse_timestamp(record.get(field))
    if model in (RecipeItem, BatchItem) and not row.get("unit"):
        row["unit"] = DEFAULT_UNIT
    if model is Batch and not row.get("status"):
        row["status"] = STATUS_PENDING
    return row


def _reset_sequences(db):
    """PostgreSQL serials do not advance on explicit ids; move them past the imported rows."""
    if db.bind.dialect.name != "postgresql":
        return
    for table_name, _ in COLLECTIONS:
        db.execute(text(
            f"SELECT setval(pg_get_serial_sequence('{table_name}', 'id'), "
            f"COALESCE((SELECT MAX(id) FROM {table_name}), 0) + 1, false)"
        ))


def import_document(db, document: dict, force: bool = False) -> dict:
    """
    Insert every record of a document-store file, keeping ids.

    Refuses to run against a database that already holds SKUs or batches
    unless ``force`` is set; ids that collide with existing rows then fail
    the whole import.
    Missing arrays count as empty. Returns the number of rows per collection.
    """
    if not isinstance(document, dict):
        raise ValueError("document must be a JSON object with one array per collection")
    if not force and (db.query(Sku.id).first() is not None or db.query(Batch.id).first() is not None):
        raise RuntimeError("database is not empty; refusing to import")

    counts = {}
    for name, model in COLLECTIONS:
        records = document.get(name) or []
        if not isinstance(records, list):
            raise ValueError(f"'{name}' must be an array")
        for record in records:
            db.add(model(**_record_to_row(model, record)))
        # flush per collection so children see their parents
        db.flush()
        counts[name] = len(records)

    _reset_sequences(db)
    db.commit()
    return counts


def export_document(db) -> dict:
    """All rows of every collection as plain records, ordered by id."""
    return {
        name: [sqlalchemy_to_dict(row) for row in db.query(model).order_by(model.id).all()]
        for name, model in COLLECTIONS
    }


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    arg_parser = argparse.ArgumentParser(description="Import or export the JSON document store.")
    sub = arg_parser.add_subparsers(dest="command", required=True)
    import_cmd = sub.add_parser("import", help="load a document-store file into an empty database")
    import_cmd.add_argument("path")
    import_cmd.add_argument("--force", action="store_true", help="import even if the database already holds data")
    export_cmd = sub.add_parser("export", help="write the database as a document-store file")
    export_cmd.add_argument("path")
    args = arg_parser.parse_args(argv)

    ensure_sqlite_directory(SQLALCHEMY_DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if args.command == "import":
            with open(args.path, "r", encoding="utf-8") as fh:
                document = json.load(fh)
            counts = import_document(db, document, force=args.force)
            logger.info("Imported %s from %s", counts, args.path)
        else:
            document = export_document(db)
            with open(args.path, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2)
            logger.info("Exported %s", {name: len(rows) for name, rows in document.items()})
    except Exception:
        db.rollback()
        logger.exception("json_store %s failed", args.command)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
