"""Pytest configuration and fixtures for backend tests.

This module provides shared fixtures for testing the backend application,
including database sessions, sample data factories, and API Gateway events.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any
from typing import Generator
from typing import Optional
from uuid import uuid4

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))


ADMIN_SUB = 'admin-user-sub'
MEMBER_SUB = 'member-user-sub'


# --- Database Fixtures ---


@pytest.fixture(scope='session')
def test_database_url() -> str:
    """Get or create a test database URL.

    Uses SQLite in-memory by default for fast, isolated tests.
    Set TEST_DATABASE_URL environment variable to use a real PostgreSQL database.
    """
    return os.getenv('TEST_DATABASE_URL', 'sqlite:///:memory:')


@pytest.fixture(scope='session')
def test_engine(test_database_url: str):
    """Create a test database engine and schema.

    This fixture creates all tables at the start of the test session
    and tears them down at the end.
    """
    from sqlalchemy import create_engine
    from sqlalchemy import event

    from guide_admin.db.base import Base
    from guide_admin.db import models  # noqa: F401

    engine = create_engine(
        test_database_url,
        echo=os.getenv('TEST_SQL_ECHO', '').lower() == 'true',
    )

    if engine.dialect.name == 'sqlite':
        # pysqlite needs explicit BEGIN for savepoints to work
        @event.listens_for(engine, 'connect')
        def _disable_pysqlite_transactions(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(engine, 'begin')
        def _emit_begin(conn):
            conn.exec_driver_sql('BEGIN')

    # Create all tables
    Base.metadata.create_all(engine)

    yield engine

    # Drop all tables
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(test_engine) -> Generator:
    """Create a test database session with automatic rollback.

    Each test gets an isolated transaction that is rolled back after the test,
    ensuring tests don't affect each other. Commits made by the code under
    test only release savepoints inside that transaction.
    """
    from sqlalchemy.orm import Session

    connection = test_engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection, join_transaction_mode='create_savepoint')

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def api_session(mocker, db_session):
    """Route the admin API's sessions to the test session."""
    factory = mocker.patch('guide_admin.api.admin.Session')
    factory.return_value.__enter__.return_value = db_session
    factory.return_value.__exit__.return_value = False
    mocker.patch('guide_admin.api.admin.get_engine')
    return db_session


@pytest.fixture(autouse=True)
def _reset_cache_listeners(monkeypatch):
    """Keep invalidation listeners and SNS publishing out of other tests."""
    from guide_admin.services import cache

    monkeypatch.delenv('CACHE_INVALIDATION_TOPIC_ARN', raising=False)
    cache.clear_listeners()
    yield
    cache.clear_listeners()


@pytest.fixture
def invalidated_tags() -> list[str]:
    """Collect cache tags invalidated during a test."""
    from guide_admin.services import cache

    tags: list[str] = []
    cache.add_listener(tags.append)
    return tags


# --- Sample Data Factories ---


@pytest.fixture
def admin_profile(db_session):
    """Create an admin profile in the test database."""
    from guide_admin.db.models import Profile

    profile = Profile(
        id=ADMIN_SUB,
        name='Admin User',
        username='admin',
        email='admin@example.com',
        is_admin=True,
    )
    db_session.add(profile)
    db_session.flush()
    return profile


@pytest.fixture
def member_profile(db_session):
    """Create a non-admin profile in the test database."""
    from guide_admin.db.models import Profile

    profile = Profile(
        id=MEMBER_SUB,
        name='Regular Member',
        username='member',
        email='member@example.com',
        is_admin=False,
        interests=['music', 'food'],
    )
    db_session.add(profile)
    db_session.flush()
    return profile


@pytest.fixture
def event_form_data() -> dict[str, Any]:
    """A valid event view model."""
    return {
        'title': 'Full Moon Party',
        'category': 'party',
        'image': 'https://example.com/full-moon.jpg',
        'time': '2024-03-11T18:00',
        'location': 'Haad Rin Beach',
        'price': '12.50',
        'description': 'Monthly beach party under the full moon.',
        'coordinates': {'latitude': 9.6779, 'longitude': 100.0677},
        'organizer': {
            'name': 'Beach Promotions',
            'contactEmail': 'info@example.com',
            'contactPhone': '',
            'website': '',
        },
        'recurrence': None,
        'duration': '8 hours',
        'tags': ['beach', 'music'],
        'capacity': 5000,
        'facilities': {'parking': True, 'toilets': True},
        'tickets': {'url': 'https://example.com/tickets', 'availableCount': 100},
        'isSponsored': False,
        'sponsorEndDate': '',
    }


@pytest.fixture
def partner_form_data() -> dict[str, Any]:
    """A valid partner view model for an accommodation establishment."""
    return {
        'name': 'Sunrise Bungalows',
        'section': 'establishment',
        'mainCategory': 'accommodation',
        'subcategory': 'bungalow',
        'images': {'main': 'https://example.com/sunrise.jpg', 'gallery': []},
        'description': {
            'short': 'Beachfront bungalows with sea views.',
            'long': '',
        },
        'location': {
            'address': '12 Beach Road, Haad Rin',
            'coordinates': {'latitude': 9.68, 'longitude': 100.06},
            'area': 'Haad Rin',
        },
        'contact': {
            'phone': '',
            'email': 'stay@example.com',
            'website': 'https://example.com',
            'lineId': '',
            'social': {'facebook': 'sunrise', 'instagram': '', 'twitter': ''},
        },
        'hours': {'regularHours': '24/7', 'seasonalChanges': '', 'open24h': True},
        'rating': {'score': 4.5, 'reviewCount': 12},
        'tags': ['beach'],
        'prices': {'priceRange': '€€', 'currency': 'THB'},
        'features': ['Sea view'],
        'languages': ['en', 'th'],
        'promotion': {'isSponsored': False, 'isFeatured': False, 'promotionEndsAt': ''},
        'accessibility': {'wheelchairAccessible': False},
        'paymentOptions': {'cash': True, 'creditCard': True},
        'attributeInputs': {'hasPool': True, 'hasBreakfast': True, 'roomCount': '12'},
    }


@pytest.fixture
def service_form_data() -> dict[str, Any]:
    """A valid service view model for a health service."""
    return {
        'name': 'Island Clinic',
        'category': 'health',
        'subcategory': 'clinic',
        'shortDescription': 'Walk-in clinic near the pier.',
        'address': '1 Pier Road',
        'coordinates': {'latitude': 9.7, 'longitude': 100.0},
        'contactInfo': {'phone': '', 'email': 'care@example.com'},
        'priceRange': '€€',
        'currency': 'THB',
        'tags': ['clinic'],
        'serviceData': {
            'emergencyService': True,
            'emergencyNumber': '1669',
            'unknownKey': 'dropped',
        },
    }


# --- API Event Fixtures ---


def make_api_event(
    method: str = 'GET',
    path: str = '/v1/admin/events',
    body: Optional[dict[str, Any]] = None,
    query: Optional[dict[str, str]] = None,
    user_sub: Optional[str] = ADMIN_SUB,
    headers: Optional[dict[str, str]] = None,
) -> dict[str, Any]:
    """Build an API Gateway proxy event with a Cognito-style authorizer."""
    request_headers = dict(headers or {})
    if body is not None:
        request_headers.setdefault('Content-Type', 'application/json')
    authorizer: dict[str, Any] = {}
    if user_sub:
        authorizer = {'claims': {'sub': user_sub, 'email': 'admin@example.com'}}
    return {
        'httpMethod': method,
        'path': path,
        'queryStringParameters': query or {},
        'multiValueQueryStringParameters': {},
        'headers': request_headers,
        'requestContext': {
            'requestId': str(uuid4()),
            'authorizer': authorizer,
        },
        'body': json.dumps(body) if body is not None else None,
        'isBase64Encoded': False,
    }


def response_body(response: dict[str, Any]) -> Any:
    """Decode the JSON body of a Lambda proxy response."""
    return json.loads(response['body'])


@pytest.fixture
def api_gateway_event() -> dict:
    """Base API Gateway event structure."""
    return make_api_event()


# --- Mock Fixtures ---


@pytest.fixture
def mock_boto3_client(mocker):
    """Mock boto3 client for AWS service calls."""
    mock = mocker.patch('boto3.client')
    return mock


@pytest.fixture
def activity_form_data() -> dict[str, Any]:
    """A valid activity view model."""
    return {
        'name': 'Reef Snorkelling',
        'category': 'water-sports',
        'shortDescription': 'Half-day snorkelling trip to the reef.',
        'address': 'Thong Sala Pier',
        'coordinates': {'latitude': 9.71, 'longitude': 99.99},
        'priceRange': '€€',
        'currency': 'THB',
        'activityData': {'durationHours': 4, 'includes': ['mask', 'lunch']},
    }


@pytest.fixture
def guide_form_data() -> dict[str, Any]:
    """A valid guide view model."""
    return {
        'title': 'Visa Runs from the Island',
        'category': 'visa',
        'slug': 'visa-runs',
        'mainImage': 'https://example.com/visa.jpg',
        'shortDescription': 'How to extend your stay legally.',
        'longDescription': 'Step by step notes on immigration offices and ferries.',
        'rating': 4.5,
        'reviews': 10,
        'tags': 'visa, ferry',
        'sections': [
            {'title': 'Before you go', 'content': 'Bring your passport.'},
            {'title': 'At the office', 'content': 'Queue early.', 'order': 5},
        ],
        'contacts': [
            {'name': 'Immigration', 'type': 'office', 'phone': '077 421 069'},
        ],
        'practicalInfo': {'openingHours': '08:30-16:30'},
    }
