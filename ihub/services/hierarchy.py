# ihub/services/hierarchy.py
"""Creating a child record under a parent.

There is no transaction spanning both writes. Phase one persists the child,
phase two appends its id to the parent's reference list. If phase two fails
the child stays behind as an orphan: reachable by its own id, absent from
every graph traversal. It is logged and not cleaned up.
"""
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import StoreError
from ..utils.logging import service_logger


def persist_child(db: Session, child):
    """Phase one: write the child record on its own"""
    db.add(child)
    db.commit()
    db.refresh(child)
    return child


def attach_child(db: Session, parent, ref_field: str, child_id: str) -> None:
    """Phase two: append child_id to the parent's reference list and save the parent"""
    refs = getattr(parent, ref_field)
    if refs is None:
        setattr(parent, ref_field, [child_id])
    else:
        refs.append(child_id)
    db.commit()


def create_and_attach(db: Session, parent, ref_field: str, child, kind: str):
    child = persist_child(db, child)

    try:
        attach_child(db, parent, ref_field, child.id)
    except SQLAlchemyError as e:
        db.rollback()
        service_logger.error("Child record orphaned, parent update failed", extra={
            "kind": kind,
            "child_id": child.id,
            "parent_id": parent.id,
            "error": str(e)
        })
        raise StoreError(f"{kind} {child.id} was created but could not be attached to its parent")

    service_logger.info(f"{kind} attached to parent", extra={
        "child_id": child.id,
        "parent_id": parent.id,
        "position": len(getattr(parent, ref_field)) - 1
    })
    db.refresh(child)
    return child
