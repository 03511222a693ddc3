from sqlalchemy.orm import class_mapper
from .tablet_utils import calculate_expected_tablet_count

def sqlalchemy_to_dict(obj):
    """Convert a SQLAlchemy object to a dictionary."""
    if not obj:
        return None
    mapper = class_mapper(obj.__class__)
    result = {}
    for c in mapper.columns:
        value = getattr(obj, c.key)
        # Convert datetime objects to ISO format strings
        if hasattr(value, 'isoformat'):
            value = value.isoformat()
        result[c.key] = value
    return result

__all__ = ['calculate_expected_tablet_count', 'sqlalchemy_to_dict']
