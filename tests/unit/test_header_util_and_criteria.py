import pytest
from pydantic import ValidationError

from app.core.exceptions import BadRequestAlertException
from app.core.header_util import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
)
from app.schemas.criteria import ImageCriteria


def test_entity_alerts():
    assert create_entity_creation_alert("image", "7") == {
        "X-teamdojoApp-alert": "teamdojoApp.image.created",
        "X-teamdojoApp-params": "7",
    }
    assert create_entity_update_alert("image", "7")["X-teamdojoApp-alert"] == "teamdojoApp.image.updated"
    assert create_entity_deletion_alert("training", "3")["X-teamdojoApp-alert"] == "teamdojoApp.training.deleted"

def test_failure_alert_and_exception():
    assert create_failure_alert("image", "idexists") == {
        "X-teamdojoApp-error": "error.idexists",
        "X-teamdojoApp-params": "image",
    }
    exc = BadRequestAlertException("A new image cannot already have an ID", "image", "idexists")
    assert exc.status_code == 400
    assert exc.headers["X-teamdojoApp-error"] == "error.idexists"

def test_criteria_from_query_params():
    criteria = ImageCriteria.from_query_params([
        ("page", "0"),
        ("id.in", "1,2"),
        ("id.in", "3"),
        ("id.greaterThan", "0"),
        ("name.contains", "logo"),
        ("hash.specified", "false"),
        ("unknown.equals", "x"),
    ])

    assert criteria.id.in_ == [1, 2, 3]
    assert criteria.id.greater_than == 0
    assert criteria.name.contains == "logo"
    assert criteria.hash.specified is False
    assert ImageCriteria.from_query_params([("size", "20")]) == ImageCriteria()

def test_criteria_rejects_unknown_operation():
    with pytest.raises(ValidationError):
        ImageCriteria.from_query_params([("name.startsWith", "lo")])
