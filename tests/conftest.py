"""
TIMETRACK Metrics API - Test Configuration

Shared fixtures: fresh in-memory repositories, an empty metrics cache and a
frozen calendar day for every API test.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from timetrack.boxes.models import BoxSettings
from timetrack.boxes.repository import InMemoryBoxRepository
from timetrack.boxes.router import get_box_repository
from timetrack.datasets.repository import InMemoryDatasetRepository
from timetrack.datasets.router import get_dataset_repository
from timetrack.main import app
from timetrack.metrics.cache import MetricsCache
from timetrack.metrics.router import get_metrics_cache, get_today


FROZEN_TODAY = date(2025, 1, 15)


@pytest.fixture
def today():
    """A fixed reference day (a Wednesday)."""
    return FROZEN_TODAY


@pytest.fixture
def dataset_repository():
    """Provide a fresh in-memory dataset repository for each test."""
    return InMemoryDatasetRepository()


@pytest.fixture
def box_repository():
    """Provide a fresh in-memory box repository (exclusive boxes on)."""
    return InMemoryBoxRepository(BoxSettings(exclusive_boxes=True))


@pytest.fixture
def metrics_cache():
    return MetricsCache(max_entries=8)


@pytest.fixture
def client(dataset_repository, box_repository, metrics_cache):
    """Create test client with in-memory repositories and a frozen day."""

    async def override_get_dataset_repository():
        return dataset_repository

    async def override_get_box_repository():
        return box_repository

    async def override_get_metrics_cache():
        return metrics_cache

    async def override_get_today():
        return FROZEN_TODAY

    app.dependency_overrides[get_dataset_repository] = override_get_dataset_repository
    app.dependency_overrides[get_box_repository] = override_get_box_repository
    app.dependency_overrides[get_metrics_cache] = override_get_metrics_cache
    app.dependency_overrides[get_today] = override_get_today

    yield TestClient(app)
    # Clean up overrides after test
    app.dependency_overrides.clear()


@pytest.fixture
def sample_dataset():
    """Two members, one shared project name, subtasks and time entries."""
    return [
        {
            "assignee": "Ana",
            "projects": [
                {
                    "name": "Portal",
                    "tasks": [
                        {
                            "id": "t1",
                            "name": "Login page",
                            "status": "Em andamento",
                            "priority": "1",
                            "assignee": "Ana",
                            "dueDate": "2025-01-10",
                            "timeEstimate": 8,
                            "timeLogged": 5,
                            "tags": [{"name": "frontend"}, "bug"],
                            "timeEntries": [
                                {"date": "2025-01-13", "hours": 1.5},
                                {"date": "2025-01-14", "hours": 3.5},
                            ],
                            "subtasks": [
                                {
                                    "id": "t1-a",
                                    "name": "Form validation",
                                    "status": "Concluído",
                                    "priority": "alta",
                                    "assignee": "Ana",
                                    "dueDate": "2025-01-16",
                                    "timeEstimate": 2,
                                    "timeLogged": 2,
                                    "timeEntries": [{"date": "2025-01-13", "hours": 2}],
                                },
                            ],
                        },
                        {
                            "id": "t2",
                            "name": "Search",
                            "status": "Bloqueado",
                            "priority": {"priority": "urgent", "id": "1"},
                            "assignee": "Ana / Bruno",
                            "dueDate": 1736942400000,
                            "timeEstimate": 4,
                            "timeLogged": 0,
                        },
                    ],
                },
            ],
        },
        {
            "assignee": "Bruno",
            "projects": [
                {
                    "name": "Portal",
                    "tasks": [
                        {
                            "id": "t3",
                            "name": "Deploy",
                            "status": "to do",
                            "priority": 2,
                            "assignee": "Bruno",
                            "dueDate": "2025-01-21T10:00:00.000Z",
                            "timeEstimate": 3,
                            "timeLogged": 1,
                            "timeEntries": [{"date": "2025-01-14", "hours": 1}],
                        },
                    ],
                },
                {
                    "name": "",
                    "tasks": [
                        {"id": "t4", "name": "Triage inbox", "status": "open"},
                    ],
                },
            ],
        },
    ]


@pytest.fixture
def loaded_client(client, sample_dataset):
    """Client with the sample dataset already loaded."""
    response = client.put("/dataset", json=sample_dataset)
    assert response.status_code == 200
    return client
