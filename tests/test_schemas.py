"""Tests for the form schemas and validate_form."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from guide_admin.schemas import (  # noqa: E402
    ActivityForm,
    EventForm,
    GuideForm,
    PartnerForm,
    ProfileForm,
    ServiceForm,
    SponsorshipForm,
    validate_form,
)


def _fields(violations) -> set[str]:
    return {violation.field for violation in violations}


class TestEventForm:
    """Tests for event validation."""

    def test_valid_form_has_no_violations(self, event_form_data) -> None:
        assert validate_form(EventForm, event_form_data) == []

    def test_nested_violation_uses_dotted_path(self, event_form_data) -> None:
        event_form_data['organizer']['name'] = ''
        violations = validate_form(EventForm, event_form_data)
        assert _fields(violations) == {'organizer.name'}

    def test_missing_required_fields(self) -> None:
        fields = _fields(validate_form(EventForm, {}))
        assert {'title', 'image', 'description', 'organizer'} <= fields

    def test_sponsored_event_requires_end_date(self, event_form_data) -> None:
        event_form_data['isSponsored'] = True
        event_form_data['sponsorEndDate'] = ''
        violations = validate_form(EventForm, event_form_data)
        assert _fields(violations) == {'sponsorEndDate'}

    def test_custom_recurrence_requires_pattern(self, event_form_data) -> None:
        event_form_data['recurrence'] = {'pattern': 'custom', 'customPattern': ''}
        violations = validate_form(EventForm, event_form_data)
        assert _fields(violations) == {'recurrence.customPattern'}

    def test_unknown_recurrence_pattern(self, event_form_data) -> None:
        event_form_data['recurrence'] = {'pattern': 'hourly'}
        assert _fields(validate_form(EventForm, event_form_data)) == {
            'recurrence.pattern'
        }

    def test_image_must_be_http_url(self, event_form_data) -> None:
        event_form_data['image'] = 'ftp://example.com/a.jpg'
        violations = validate_form(EventForm, event_form_data)
        assert violations[0].field == 'image'
        assert 'http' in violations[0].message

    def test_invalid_contact_details(self, event_form_data) -> None:
        event_form_data['organizer']['contactEmail'] = 'not-an-email'
        event_form_data['organizer']['contactPhone'] = 'abc'
        fields = _fields(validate_form(EventForm, event_form_data))
        assert fields == {'organizer.contactEmail', 'organizer.contactPhone'}

    def test_negative_ticket_count(self, event_form_data) -> None:
        event_form_data['tickets'] = {'availableCount': -1}
        assert _fields(validate_form(EventForm, event_form_data)) == {
            'tickets.availableCount'
        }

    def test_numeric_price_and_comma_tags_are_accepted(self, event_form_data) -> None:
        event_form_data['price'] = 10
        event_form_data['tags'] = 'beach, music'
        form = EventForm.model_validate(event_form_data)
        assert form.price == '10'
        assert form.tags == ['beach', 'music']

    def test_ticket_type_prices_are_free_text(self, event_form_data) -> None:
        event_form_data['tickets']['types'] = [
            {'name': 'VIP', 'price': 'Free'},
            {'name': 'GA', 'price': 12.5},
        ]
        form = EventForm.model_validate(event_form_data)
        assert [ticket.price for ticket in form.tickets.types] == ['Free', '12.5']

    def test_read_only_keys_are_ignored(self, event_form_data) -> None:
        event_form_data['id'] = 'abc'
        event_form_data['attendeeCount'] = 12
        assert validate_form(EventForm, event_form_data) == []


class TestPartnerForm:
    """Tests for partner validation."""

    def test_valid_form_has_no_violations(self, partner_form_data) -> None:
        assert validate_form(PartnerForm, partner_form_data) == []

    def test_unknown_main_category(self, partner_form_data) -> None:
        partner_form_data['mainCategory'] = 'casino'
        assert _fields(validate_form(PartnerForm, partner_form_data)) == {
            'mainCategory'
        }

    def test_unknown_section(self, partner_form_data) -> None:
        partner_form_data['section'] = 'market'
        assert _fields(validate_form(PartnerForm, partner_form_data)) == {'section'}

    def test_invalid_currency(self, partner_form_data) -> None:
        partner_form_data['prices']['currency'] = 'ZZZ'
        assert _fields(validate_form(PartnerForm, partner_form_data)) == {
            'prices.currency'
        }

    def test_currency_is_normalized(self, partner_form_data) -> None:
        partner_form_data['prices']['currency'] = 'thb'
        form = PartnerForm.model_validate(partner_form_data)
        assert form.prices.currency == 'THB'

    def test_gallery_urls_are_checked(self, partner_form_data) -> None:
        partner_form_data['images']['gallery'] = ['not a url']
        violations = validate_form(PartnerForm, partner_form_data)
        assert _fields(violations) == {'images.gallery'}

    def test_rating_out_of_range(self, partner_form_data) -> None:
        partner_form_data['rating'] = {'score': 6, 'reviewCount': 1}
        assert _fields(validate_form(PartnerForm, partner_form_data)) == {
            'rating.score'
        }

    def test_sponsored_partner_requires_end_date(self, partner_form_data) -> None:
        partner_form_data['promotion'] = {'isSponsored': True}
        assert _fields(validate_form(PartnerForm, partner_form_data)) == {
            'promotion.promotionEndsAt'
        }

    def test_attribute_inputs_are_typed(self, partner_form_data) -> None:
        partner_form_data['attributeInputs'] = {
            'roomCount': 'lots',
            'hasPool': 'maybe',
        }
        assert _fields(validate_form(PartnerForm, partner_form_data)) == {
            'attributeInputs.roomCount',
            'attributeInputs.hasPool',
        }

    def test_attribute_input_lists_accept_text(self, partner_form_data) -> None:
        partner_form_data['attributeInputs'] = {'vehicleTypes': 'scooter, jeep'}
        form = PartnerForm.model_validate(partner_form_data)
        assert form.attributeInputs.vehicleTypes == ['scooter', 'jeep']

    def test_phone_with_country_code(self, partner_form_data) -> None:
        partner_form_data['contact']['phone'] = '+66 81 234 5678'
        assert validate_form(PartnerForm, partner_form_data) == []


class TestServiceForm:
    """Tests for service validation."""

    def test_valid_form_has_no_violations(self, service_form_data) -> None:
        assert validate_form(ServiceForm, service_form_data) == []

    def test_unknown_price_range(self, service_form_data) -> None:
        service_form_data['priceRange'] = '$$$'
        assert _fields(validate_form(ServiceForm, service_form_data)) == {
            'priceRange'
        }

    def test_short_description_too_short(self, service_form_data) -> None:
        service_form_data['shortDescription'] = 'Short'
        assert _fields(validate_form(ServiceForm, service_form_data)) == {
            'shortDescription'
        }


class TestScopedValidation:
    """Tests for validate_form with a field scope."""

    def test_out_of_scope_violations_are_dropped(self) -> None:
        data = {'title': 'Renamed', 'category': 'party'}
        assert 'image' in _fields(validate_form(EventForm, data))
        assert validate_form(EventForm, data, ['title']) == []

    def test_related_fields_join_the_scope(self) -> None:
        data = {'title': 'Renamed', 'isSponsored': True}
        assert _fields(validate_form(EventForm, data, ['isSponsored'])) == {
            'sponsorEndDate'
        }

    def test_nested_paths_match_top_level_key(self, event_form_data) -> None:
        event_form_data['organizer']['contactEmail'] = 'nope'
        event_form_data['title'] = 'ab'
        assert _fields(validate_form(EventForm, event_form_data, ['organizer'])) == {
            'organizer.contactEmail'
        }


class TestActivityForm:
    """Tests for activity validation."""

    def test_valid_form_has_no_violations(self, activity_form_data) -> None:
        assert validate_form(ActivityForm, activity_form_data) == []

    def test_shares_base_item_rules(self, activity_form_data) -> None:
        activity_form_data['priceRange'] = '$$'
        assert _fields(validate_form(ActivityForm, activity_form_data)) == {
            'priceRange'
        }


class TestGuideForm:
    """Tests for guide validation."""

    def test_valid_form_has_no_violations(self, guide_form_data) -> None:
        assert validate_form(GuideForm, guide_form_data) == []

    def test_slug_pattern(self, guide_form_data) -> None:
        guide_form_data['slug'] = 'Visa Runs'
        assert _fields(validate_form(GuideForm, guide_form_data)) == {'slug'}

    def test_nested_entries_use_indexed_paths(self, guide_form_data) -> None:
        guide_form_data['sections'].append({'title': 'Empty', 'content': '', 'order': 0})
        guide_form_data['contacts'][0]['email'] = 'not-an-email'
        assert _fields(validate_form(GuideForm, guide_form_data)) == {
            'sections.2.content',
            'sections.2.order',
            'contacts.0.email',
        }

    def test_gallery_must_be_urls(self, guide_form_data) -> None:
        guide_form_data['galleryImages'] = 'https://example.com/a.jpg, ftp://x'
        assert _fields(validate_form(GuideForm, guide_form_data)) == {'galleryImages'}


class TestProfileForm:
    """Tests for profile validation."""

    def test_empty_profile_is_valid(self) -> None:
        assert validate_form(ProfileForm, {}) == []

    def test_username_pattern(self) -> None:
        assert _fields(validate_form(ProfileForm, {'username': 'a b'})) == {
            'username'
        }

    def test_unknown_visibility(self) -> None:
        violations = validate_form(
            ProfileForm, {'privacySettings': {'profileVisibility': 'everyone'}}
        )
        assert _fields(violations) == {'privacySettings.profileVisibility'}


class TestSponsorshipForm:
    """Tests for sponsorship validation."""

    def test_sponsoring_requires_end_date(self) -> None:
        violations = validate_form(SponsorshipForm, {'isSponsored': True})
        assert _fields(violations) == {'endDate'}
        assert violations[0].message == 'is required when marking as sponsored'

    def test_end_date_must_be_iso(self) -> None:
        violations = validate_form(
            SponsorshipForm, {'isSponsored': True, 'endDate': 'next week'}
        )
        assert violations[0].message == 'must be an ISO-8601 date'

    def test_unsponsoring_clears_end_date(self) -> None:
        form = SponsorshipForm.model_validate({'isSponsored': False, 'endDate': ' '})
        assert form.endDate is None

    def test_violation_serializes(self) -> None:
        violations = validate_form(SponsorshipForm, {})
        assert violations[0].to_dict() == {
            'field': 'isSponsored',
            'message': 'Field required',
        }
