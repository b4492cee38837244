import json

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def snapshot_data():
    return {
        "project_list": [
            {"id": "p1", "name": "Alpha", "color": "bg-blue-600", "icon": "🚀"},
            {"id": "p2", "name": "Beta", "color": "bg-rose-500", "icon": "💎"},
        ],
        "project_notes": {
            "p1": [
                {"id": "n1", "text": "Sketch", "createdAt": 1},
                {"id": "n2", "text": "Build", "createdAt": 2, "completed": True},
                {"id": "n3", "text": "Ship", "createdAt": 3},
                {"id": "n4", "text": "Review", "createdAt": 4},
                {"id": "c1", "text": "Sketch detail", "createdAt": 5, "parentId": "n1"},
            ],
            "p2": [{"id": "m1", "text": "Budget", "createdAt": 6}],
        },
        "project_connections": [
            {"id": "conn-1", "fromId": "n1", "toId": "n2"},
            {"id": "conn-2", "fromId": "n3", "toId": "m1"},
        ],
        "project_paths": {"p1": ["n1", "n2", "n3"]},
    }


@pytest.fixture
def snapshot_file(tmp_path, snapshot_data):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot_data))
    return path
