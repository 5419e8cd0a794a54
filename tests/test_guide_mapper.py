"""Tests for the guide record/view-model mapper."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from guide_admin.mappers import guide_to_record, guide_to_view_model  # noqa: E402

SECTIONS = [
    {'title': 'Intro', 'content': 'Welcome.', 'iconName': 'info'},
    'not an object',
    {'title': 'Ferries', 'content': 'Timetables.', 'order': 4},
]


class TestGuideToViewModel:
    """Tests for guide_to_view_model."""

    def test_empty_record_is_fully_defaulted(self) -> None:
        view = guide_to_view_model({})

        assert view['title'] == ''
        assert view['slug'] == ''
        assert view['tags'] == []
        assert view['sections'] == []
        assert view['rating'] == 0
        assert view['isFeatured'] is False
        assert view['coordinates'] == {'latitude': 0, 'longitude': 0}
        assert view['practicalInfo'] == {}

    @pytest.mark.parametrize('stored_as_text', [False, True])
    def test_sections_are_normalised(self, stored_as_text: bool) -> None:
        stored = json.dumps(SECTIONS) if stored_as_text else SECTIONS

        view = guide_to_view_model({'sections': stored})

        assert view['sections'] == [
            {'title': 'Intro', 'content': 'Welcome.', 'order': 1, 'iconName': 'info'},
            {'title': 'Ferries', 'content': 'Timetables.', 'order': 4, 'iconName': ''},
        ]

    def test_item_tags_from_text(self) -> None:
        view = guide_to_view_model(
            {'items': [{'title': 'Passport', 'tags': 'id, documents'}]}
        )
        assert view['items'] == [
            {'title': 'Passport', 'description': '', 'tags': ['id', 'documents']}
        ]


class TestGuideToRecord:
    """Tests for guide_to_record."""

    def test_only_present_keys_are_written(self) -> None:
        assert guide_to_record({'title': ' Visa Runs '}) == {'title': 'Visa Runs'}

    def test_round_trip(self) -> None:
        view = guide_to_view_model(
            {
                'title': 'Visa Runs',
                'category': 'visa',
                'slug': 'visa-runs',
                'rating': 4.5,
                'reviews': 3,
                'tags': ['visa'],
                'sections': SECTIONS,
                'coordinates': {'latitude': 9.7},
                'practical_info': '{"fee":"1900 THB"}',
            }
        )

        record = guide_to_record(view)

        assert record['slug'] == 'visa-runs'
        assert record['main_image'] is None
        assert record['rating'] == 4.5
        assert record['reviews'] == 3
        assert len(record['sections']) == 2
        assert record['coordinates'] == {'latitude': 9.7, 'longitude': 0.0}
        assert record['practical_info'] == {'fee': '1900 THB'}
        assert guide_to_view_model(record)['sections'] == view['sections']
