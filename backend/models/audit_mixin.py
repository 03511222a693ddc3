from sqlalchemy import Column, DateTime
from datetime import datetime
from dotenv import load_dotenv
import os
import pytz

load_dotenv()

APP_TIMEZONE = os.getenv("APP_TIMEZONE", "UTC")


def now_local():
    """Current time as a timezone-aware datetime in the configured APP_TIMEZONE."""
    return datetime.now(pytz.timezone(APP_TIMEZONE))


class CreatedAtMixin:
    """Mixin for records that are written once and never updated (SKUs)."""
    created_at = Column(DateTime(timezone=True), default=now_local, nullable=False)


class TimestampMixin(CreatedAtMixin):
    """Mixin that provides created/updated timestamps.

    ``updated_at`` is populated on insert so freshly created rows carry both
    values, and is refreshed by the ORM whenever the row is flushed with
    changes. Bulk ``Query.update`` calls must set it explicitly.
    """
    updated_at = Column(DateTime(timezone=True), default=now_local, onupdate=now_local, nullable=False)
